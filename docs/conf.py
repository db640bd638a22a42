"""Sphinx configuration for utf8clen documentation."""

import utf8clen

project = "utf8clen"
copyright = "2025, utf8clen contributors"
author = "utf8clen contributors"
release = utf8clen.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
