# mypy: ignore_errors

# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# Project information

project = 'finsets'
release = '0.1.0'

# General configuration

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.mathjax',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

autodoc_class_signature = 'separated'

autodoc_default_options = {
    'member-order': 'bysource',
    'show-inheritance': True,
}

# Doctests in docstrings run with the package namespace available:
doctest_global_setup = '''
from finsets import *
'''

intersphinx_mapping = {
    'sympy': ('https://docs.sympy.org/latest', None),
    'python': ('https://docs.python.org/3', None),
}

language = 'en'

python_use_unqualified_type_names = True

# Options for HTML output

html_theme = 'sphinx_book_theme'

html_theme_options = {
    'home_page_in_toc': True,
    'show_toc_level': 1,
}

html_title = 'finsets'
