import os
import sys

# Put project root on sys.path so autoapi and doctest can import the package
sys.path.insert(0, os.path.abspath("../.."))

project = "abdash"

extensions = [
    "autoapi.extension",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "myst_nb",
    "sphinx_copybutton",
]
templates_path = []
exclude_patterns = []

nb_execution_mode = "off"

html_theme = "alabaster"

master_doc = "index"

# ---------------------------------------------------------------------------
# sphinx-autoapi: API reference for the `abdash` package
# ---------------------------------------------------------------------------
autoapi_type = "python"
autoapi_dirs = ["../../abdash"]
autoapi_ignore = [
    "**/tests/**",
    "**/__pycache__/**",
]

autodoc_typehints = "description"

autoapi_options = [
    "members",
    "undoc-members",
    "show-inheritance",
    "show-module-summary",
]

autoapi_python_class_content = "both"
