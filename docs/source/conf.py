# Sphinx configuration for the guardclause docs.
# Build with: sphinx-build docs/source docs/build

import importlib.metadata

project = "guardclause"
copyright = "2025, The guardclause developers"
author = "The guardclause developers"

try:
    release = importlib.metadata.version(project)
except importlib.metadata.PackageNotFoundError:
    release = "0.0.0"

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

source_suffix = {".rst": "restructuredtext", ".md": "markdown"}

# guards are documented with Google-style Args/Returns/Raises sections
napoleon_google_docstring = True
napoleon_numpy_docstring = False

# PEP 695 type params render poorly in signatures otherwise
autodoc_typehints = "description"
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "special-members": "",
}

html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "navigation_depth": 2,
}
