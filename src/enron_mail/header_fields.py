"""Recognized Enron header fields and the rules for writing their values."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional

from enron_mail.models.email_record import Email
from enron_mail.patterns import extract_addresses, extract_names, split_on_commas

logger = logging.getLogger(__name__)


class FieldKind(Enum):
    """How a header's text turns into the stored value."""

    RAW = "raw"
    EXTRACTED = "extracted"
    COMMA_SPLIT = "comma_split"


class HeaderField(Enum):
    """Closed set of header names, in the order they appear in a file."""

    MESSAGE_ID = ("Message-ID", "message_id", FieldKind.RAW)
    DATE = ("Date", "date", FieldKind.RAW)
    FROM = ("From", "from_", FieldKind.RAW)
    TO = ("To", "to", FieldKind.EXTRACTED)
    CC = ("Cc", "cc", FieldKind.EXTRACTED)
    BCC = ("Bcc", "bcc", FieldKind.EXTRACTED)
    SUBJECT = ("Subject", "subject", FieldKind.RAW, "\n")
    MIME_VERSION = ("Mime-Version", "mime_version", FieldKind.RAW)
    CONTENT_TYPE = ("Content-Type", "content_type", FieldKind.RAW)
    CONTENT_TRANSFER_ENCODING = (
        "Content-Transfer-Encoding",
        "content_transfer_encoding",
        FieldKind.RAW,
    )
    X_FROM = ("X-From", "x_from", FieldKind.RAW)
    X_TO = ("X-To", "x_to", FieldKind.COMMA_SPLIT)
    X_CC = ("X-cc", "x_cc", FieldKind.EXTRACTED)
    X_BCC = ("X-bcc", "x_bcc", FieldKind.EXTRACTED)
    X_FOLDER = ("X-Folder", "x_folder", FieldKind.RAW)
    X_ORIGIN = ("X-Origin", "x_origin", FieldKind.RAW)
    X_FILENAME = ("X-FileName", "x_filename", FieldKind.RAW)

    def __init__(
        self, header_name: str, attribute: str, kind: FieldKind, separator: str = ""
    ) -> None:
        self.header_name = header_name
        self.attribute = attribute
        self.kind = kind
        self.separator = separator

    @classmethod
    def lookup(cls, name: str) -> Optional["HeaderField"]:
        """Case-sensitive lookup by header name."""
        return _BY_NAME.get(name)

    @property
    def is_terminal(self) -> bool:
        """Body content starts right after this header."""
        return self is HeaderField.X_FILENAME


_BY_NAME: Dict[str, HeaderField] = {field.header_name: field for field in HeaderField}

HEADER_NAMES = tuple(_BY_NAME)


def _extract(text: str) -> List[str]:
    return extract_addresses(text) + extract_names(text)


class FieldValueBuilder:
    """Write header text into an :class:`Email` following each field's kind."""

    def __init__(self, source: str = "<memory>") -> None:
        self.source = source

    def apply(self, email: Email, field_name: str, text: str, *, append: bool = False) -> None:
        """
        Assign ``text`` to the field named ``field_name``, or append it when
        ``append`` is set. Unknown names are logged and dropped.
        """
        field = HeaderField.lookup(field_name)
        if field is None:
            logger.warning(
                "No match found for field %r (value=%r) in %s",
                field_name,
                text,
                self.source,
            )
            return
        self.write(email, field, text, append=append)

    def write(self, email: Email, field: HeaderField, text: str, *, append: bool = False) -> None:
        if field.kind is FieldKind.RAW:
            if append:
                current = getattr(email, field.attribute)
                setattr(email, field.attribute, current + field.separator + text)
            else:
                setattr(email, field.attribute, text.strip())
            return

        if field.kind is FieldKind.EXTRACTED:
            values = _extract(text)
        else:
            values = split_on_commas(text)

        if append:
            getattr(email, field.attribute).extend(values)
        else:
            setattr(email, field.attribute, values)


__all__ = ["FieldKind", "FieldValueBuilder", "HEADER_NAMES", "HeaderField"]
