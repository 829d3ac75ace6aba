"""
Line-oriented parser for Enron maildir files.

Each line is either a recognized header, a continuation of the previous
header, or (once ``X-FileName`` has been read) body content.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional, Union

from enron_mail.header_fields import FieldValueBuilder, HeaderField
from enron_mail.models.email_record import Document, Email

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class EnronEmailParser:
    """Turn Enron email files into :class:`Email` records."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def parse(self, path: PathLike) -> Email:
        """
        Parse the file at ``path``.

        Raises ``OSError`` if the file cannot be opened. A file that does not
        start with a Message-ID header is abandoned after its first line and
        the partial record is returned.
        """
        source = os.fspath(path)
        with open(source, "r", encoding=self.encoding, errors="replace", newline="\n") as handle:
            return self.parse_lines(handle, source=source)

    def parse_document(self, path: PathLike) -> Document:
        return Document(path=os.fspath(path), email=self.parse(path))

    def parse_lines(self, lines: Iterable[str], *, source: str = "<memory>") -> Email:
        email = Email()
        builder = FieldValueBuilder(source)
        current: Optional[HeaderField] = None
        in_body = False
        first_line = True

        for raw in lines:
            line = raw.rstrip("\r\n")
            if in_body:
                email.body += "\n" + line
                continue

            current = self._classify(email, builder, line, current)

            if first_line:
                first_line = False
                if not email.is_valid:
                    logger.debug("No Message-ID on first line of %s; skipping rest of file", source)
                    return email

            if current is not None and current.is_terminal:
                in_body = True

        return email

    @staticmethod
    def _classify(
        email: Email,
        builder: FieldValueBuilder,
        line: str,
        current: Optional[HeaderField],
    ) -> Optional[HeaderField]:
        """Apply one header-block line and return the field now active."""
        parts = line.split(":", 1)
        field = HeaderField.lookup(parts[0])
        if field is not None and len(parts) == 2:
            builder.write(email, field, parts[1])
            return field

        # continuation; nothing to extend before the first header
        if current is not None:
            builder.write(email, current, line, append=True)
        return current


def parse_email_file(path: PathLike, *, encoding: str = "utf-8") -> Email:
    """Convenience wrapper around :meth:`EnronEmailParser.parse`."""
    return EnronEmailParser(encoding=encoding).parse(path)


__all__ = ["EnronEmailParser", "parse_email_file"]
