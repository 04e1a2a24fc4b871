"""CORS-enabled message board endpoint."""

__version__ = "1.0.0"
