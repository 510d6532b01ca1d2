"""Small building blocks: helpers, data structures, a WSGI router and movie services."""

__version__ = "0.1.0"