"""Data models for parsed Enron email files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Email:
    """Header fields and body of one Enron email file."""

    message_id: str = ""
    date: str = ""
    from_: str = ""
    to: List[str] = field(default_factory=list)
    cc: List[str] = field(default_factory=list)
    bcc: List[str] = field(default_factory=list)
    subject: str = ""
    mime_version: str = ""
    content_type: str = ""
    content_transfer_encoding: str = ""
    x_from: str = ""
    x_to: List[str] = field(default_factory=list)
    x_cc: List[str] = field(default_factory=list)
    x_bcc: List[str] = field(default_factory=list)
    x_folder: str = ""
    x_origin: str = ""
    x_filename: str = ""
    body: str = ""

    @property
    def is_valid(self) -> bool:
        """An email only counts as one once its Message-ID is known."""
        return bool(self.message_id)

    def to_properties(self) -> Dict[str, Any]:
        """Serialise record fields for search backend storage."""
        return {
            "message_id": self.message_id,
            "date": self.date,
            "sender": self.from_,
            "to": list(self.to),
            "cc": list(self.cc),
            "bcc": list(self.bcc),
            "subject": self.subject,
            "mime_version": self.mime_version,
            "content_type": self.content_type,
            "content_transfer_encoding": self.content_transfer_encoding,
            "x_from": self.x_from,
            "x_to": list(self.x_to),
            "x_cc": list(self.x_cc),
            "x_bcc": list(self.x_bcc),
            "x_folder": self.x_folder,
            "x_origin": self.x_origin,
            "x_filename": self.x_filename,
            "body": self.body,
        }


@dataclass(frozen=True)
class Document:
    """A parsed email paired with the file it came from."""

    path: str
    email: Email

    def to_properties(self) -> Dict[str, Any]:
        return {"path": self.path, **self.email.to_properties()}
