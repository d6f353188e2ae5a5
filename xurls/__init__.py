"""Extract URLs from plain text using regular expressions."""

__version__ = "0.1.0"
__all__ = ["cli", "generate", "patterns", "schemes", "tlds"]