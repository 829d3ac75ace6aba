"""Walk a maildir tree, parse every email file, and upload in batches."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Protocol, Sequence, Union

from enron_mail.email_parser import EnronEmailParser
from enron_mail.models.email_record import Document

logger = logging.getLogger(__name__)


class DocumentSink(Protocol):
    def upload(self, documents: Sequence[Document]) -> int: ...


def is_empty_file(path: Union[str, os.PathLike]) -> bool:
    """True when the file at ``path`` has zero bytes."""
    return os.stat(path).st_size == 0


def _raise(error: OSError) -> None:
    raise error


def iter_documents(
    root: Union[str, os.PathLike],
    parser: Optional[EnronEmailParser] = None,
) -> Iterator[Document]:
    """Yield a Document per non-empty file under ``root``, in sorted order."""
    parser = parser or EnronEmailParser()
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            if is_empty_file(path):
                logger.debug("Skipping empty file %s", path)
                continue
            yield parser.parse_document(path)


def batched(documents: Iterable[Document], size: int) -> Iterator[List[Document]]:
    """Group documents into lists of at most ``size``."""
    if size < 1:
        raise ValueError("batch size must be positive")
    batch: List[Document] = []
    for document in documents:
        batch.append(document)
        if len(batch) == size:
            yield batch
            batch = []
    if batch:
        yield batch


def index_directory(
    root: Union[str, os.PathLike],
    repository: DocumentSink,
    parser: Optional[EnronEmailParser] = None,
    batch_size: int = 100,
) -> int:
    """Parse every email under ``root`` and upload them; return the count indexed."""
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Mail directory not found: {root}")

    logger.info("Indexing documents under %s", root)
    count = 0
    for batch in batched(iter_documents(root, parser), batch_size):
        count += repository.upload(batch)
        logger.info("Indexed %s documents so far", count)
    logger.info("Indexing completed: %s documents", count)
    return count
