"""Parsing of Enron corpus email files into structured records."""

from .email_parser import EnronEmailParser, parse_email_file
from .header_fields import FieldKind, FieldValueBuilder, HeaderField
from .models import Document, Email

__all__ = [
    "Document",
    "Email",
    "EnronEmailParser",
    "FieldKind",
    "FieldValueBuilder",
    "HeaderField",
    "parse_email_file",
]
