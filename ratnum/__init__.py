"""Exact rational numbers with easy conversions, text forms and compact encodings."""

__version__ = "0.1.0"
__all__ = ["codec", "literal", "number", "text", "varint"]