"""Helpers for MediaWiki markup tools: text, Unicode, string interning, line reading and data types."""

__version__ = "0.1.0"
__all__ = ["text", "model", "string_pool", "unicode_utils", "line_reader"]