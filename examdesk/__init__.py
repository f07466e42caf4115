"""Question and exam records, their plain-text file formats and a file-backed store."""

__version__ = "0.1.0"
__all__ = ["models", "storage"]