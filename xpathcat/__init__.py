"""Evaluate an XPath expression against XML documents and print the result."""

__version__ = "0.1.0"
