"""Upload of parsed Enron documents into Weaviate."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional, Sequence

import weaviate
from weaviate.classes.data import DataObject
from weaviate.util import generate_uuid5

from enron_index.config import Settings, get_settings
from enron_mail.models.email_record import Document

if TYPE_CHECKING:  # pragma: no cover - import only used for typing
    from weaviate.client import WeaviateClient

logger = logging.getLogger(__name__)


class EnronEmailRepository:
    """Sends batches of documents to a Weaviate collection."""

    def __init__(self, client: "WeaviateClient", collection_name: str) -> None:
        self._client = client
        self._collection_name = collection_name
        # relies on the server's auto-schema; no collection is created here
        self._collection = client.collections.get(collection_name)

    @classmethod
    @contextmanager
    def connect(
        cls,
        settings: Optional[Settings] = None,
        *,
        collection_name: Optional[str] = None,
    ) -> Iterator["EnronEmailRepository"]:
        """Context-managed helper that yields a repository with an active client."""
        resolved = settings or get_settings()
        with weaviate.connect_to_local(
            host=resolved.weaviate_host,
            port=resolved.weaviate_port,
            grpc_port=resolved.weaviate_grpc_port,
            headers=resolved.headers,
        ) as client:
            yield cls(client, collection_name or resolved.index_name)

    def _uuid_for(self, path: str) -> str:
        return str(generate_uuid5(self._collection_name, path))

    def upload(self, documents: Sequence[Document]) -> int:
        """Insert one batch and return how many documents were accepted."""
        if not documents:
            return 0
        objects = [
            DataObject(properties=doc.to_properties(), uuid=self._uuid_for(doc.path))
            for doc in documents
        ]
        result = self._collection.data.insert_many(objects)
        errors = result.errors or {}
        for index, error in errors.items():
            logger.warning(
                "Failed to index %s: %s",
                documents[index].path,
                getattr(error, "message", error),
            )
        return len(documents) - len(errors)


__all__ = ["EnronEmailRepository"]
