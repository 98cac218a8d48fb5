"""Sphinx configuration for monime-python."""

project = "monime-python"
author = "monime-python contributors"
project_copyright = "2025-2026, monime-python contributors"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

autodoc_typehints = "description"
autodoc_member_order = "bysource"
autosummary_generate = True

html_theme = "furo"
html_title = "monime-python"

myst_enable_extensions = [
    "colon_fence",
    "fieldlist",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "httpx": ("https://www.python-httpx.org", None),
    "pydantic": ("https://docs.pydantic.dev/latest", None),
}
