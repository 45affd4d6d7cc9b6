"""Train-to-bus transfer recommendations for PTV services."""

__version__ = "0.1.0"
