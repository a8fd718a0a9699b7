"""Common literal values used across shr_docs.

These constants keep filenames, table tokens, and terminology URL templates
centralized so the exporter, page wrapper, writer, and tests share the same
values.

Examples
--------
>>> from shr_docs import _constants
>>> _constants.INDEX_DOCUMENT
'index.md'
>>> _constants.INDENT_UNIT.count("&nbsp;")
8
"""

INDEX_DOCUMENT = "index.md"
INDEX_BASENAME = "index"
ENTRY_INDEX_BASENAME = "entries"
MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"

NBSP = "&nbsp;"
INDENT_UNIT = NBSP * 8 + "\\|"
CHILD_ROW_PREFIX = NBSP * 8 + "with "
INDEX_COLUMNS = 3
UNKNOWN_CARDINALITY = "?"

CONCEPT_URL_TEMPLATES = {
    "http://uts.nlm.nih.gov/metathesaurus": (
        "https://uts.nlm.nih.gov/metathesaurus.html?cui={code}"
    ),
    "http://snomed.info/sct": (
        "https://uts.nlm.nih.gov/snomedctBrowser.html?conceptId={code}"
    ),
    "http://loinc.org": "http://s.details.loinc.org/LOINC/{code}.html",
    "http://unitsofmeasure.org": (
        "http://unitsofmeasure.org/ucum.html#section-Alphabetic-Index-By-Symbol"
    ),
}
