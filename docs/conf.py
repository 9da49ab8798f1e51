"""Sphinx documentation build configuration file."""  # noqa: INP001

import importlib.metadata


project = "isbnparts"
version = importlib.metadata.version("isbnparts")
release = version

html_theme = "alabaster"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
]

autodoc_default_options = {
    "members": True,
    "exclude-members": "REGISTRATION_GROUPS",
}
autodoc_preserve_defaults = True
autodoc_member_order = "bysource"

napoleon_google_docstring = True
napoleon_use_rtype = False
