"""Allow ``python -m shr_docs``."""

from .cli import main

main()
