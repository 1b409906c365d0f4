"""Header parsing, alias normalization and request helpers."""
