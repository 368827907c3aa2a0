"""Generate, read, multiply and time batches of integer matrix pairs."""

__version__ = "0.1.0"