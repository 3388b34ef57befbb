"""Portfolio website backend: content entities, views and a WSGI application."""

__version__ = "0.1.0"
__all__ = ["__version__"]