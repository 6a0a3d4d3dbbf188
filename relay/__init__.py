"""Worker relay: forwards a prompt to a hosted assistant and returns its reply."""

__version__ = "0.1.0"
