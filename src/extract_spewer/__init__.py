"""extract_spewer -- writes extracted document text and metadata to disk."""

__all__ = ["__version__"]
__version__ = "0.1.0"
