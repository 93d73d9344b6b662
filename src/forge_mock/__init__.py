"""In-memory mock of a gateway and server management REST API."""

__version__ = "0.1.0"
