import os
import sys

sys.path.insert(0, os.path.abspath("../src"))

# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

project = "password-ruler"
author = "password-ruler contributors"
release = "0.1.0"

# -- General configuration ---------------------------------------------------

suppress_warnings = ["autosectionlabel.*"]

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.autosectionlabel",
    "sphinx_prompt",
    "sphinx_sitemap",
    "sphinx_inline_tabs",
    "sphinx_togglebutton",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Options for HTML output -------------------------------------------------

html_theme = "furo"
html_title = f"{project} documentation v{release}"
htmlhelp_basename = "password-ruler-releasedoc"
html_static_path = ["_static"]
