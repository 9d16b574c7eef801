import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "urlcraft"
copyright = "2026, urlcraft contributors"
author = "urlcraft contributors"
import urlcraft

release = urlcraft.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = []
exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Re-exports in urlcraft/__init__.py document every class twice
suppress_warnings = ["ref.python"]

autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_class_content = "both"
autodoc_member_order = "bysource"

html_theme = "furo"
html_static_path = []
html_title = "urlcraft"
