"""shs — simple HTTP server with sortable directory indexes."""

__version__ = "0.1.0"
