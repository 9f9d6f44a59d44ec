# mypy: ignore_errors

# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# Project information

project = 'Algebra1'
copyright = '2026 by the algebra1 developers'
author = 'The algebra1 developers'
release = '0.1'

# General configuration

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
]

autodoc_class_signature = 'separated'

autodoc_default_options = {
    'member-order': 'bysource',
    'show-inheritance': True,
}

intersphinx_mapping = {
    'gmpy2': ('https://gmpy2.readthedocs.io/en/latest/', None),
    'python': ('https://docs.python.org/3', None),
    'sympy': ('https://docs.sympy.org/latest', None)
}

language = 'en'

python_use_unqualified_type_names = True

templates_path = ['_templates']

# Options for HTML output

html_last_updated_fmt = ''

html_static_path = ['_static']

html_theme = 'sphinx_book_theme'

html_theme_options = {
    'home_page_in_toc': True,
    'max_navbar_depth': 12,
    'show_navbar_depth': 12,
    'show_toc_level': 1
}

html_title = 'Algebra1'
