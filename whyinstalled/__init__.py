"""whyinstalled — explain why a local package is installed."""

__version__ = "0.1.0"
