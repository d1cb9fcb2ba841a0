"""HSE recruitment screening toolkit."""

__version__ = "0.1.0"
