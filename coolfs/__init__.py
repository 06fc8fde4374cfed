"""coolfs - file storage service."""

__version__ = "0.1.0"
