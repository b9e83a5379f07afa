"""CQL statement builders and table-based CRUD statement helpers."""

__version__ = "1.0.0"