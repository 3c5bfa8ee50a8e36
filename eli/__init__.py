"""ELI campus security monitoring platform."""

__version__ = "1.0.0"
