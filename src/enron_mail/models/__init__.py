from .email_record import Document, Email

__all__ = ["Document", "Email"]
