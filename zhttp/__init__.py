"""HTTP request parsing, response building and path routing."""

__version__ = "0.1.0"
__all__ = ["context", "request", "response", "router"]