"""Core package exports for the enron_index application."""

from .config import Settings, get_settings
from .ingestion import batched, index_directory, is_empty_file, iter_documents

__all__ = [
    "Settings",
    "batched",
    "get_settings",
    "index_directory",
    "is_empty_file",
    "iter_documents",
]
