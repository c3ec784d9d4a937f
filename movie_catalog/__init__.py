"""
Movie Catalog Application Package.

This package contains the catalog service: the movie record store, the
spreadsheet importer, the REST API and the Streamlit client.
"""

__version__ = "1.0.0"
