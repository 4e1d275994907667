"""Travel destination stores: data types, filtering and ordering rules, in-memory stores and an HTTP client."""

__version__ = "0.1.0"