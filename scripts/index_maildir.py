"""CLI for indexing an Enron maildir tree into Weaviate."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from enron_index.config import get_settings
from enron_index.email_repository import EnronEmailRepository
from enron_index.ingestion import index_directory
from enron_mail.email_parser import EnronEmailParser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--maildir", type=Path, default=None, help="Root of the maildir tree to index.")
    parser.add_argument("--batch-size", type=int, default=None, help="Documents sent per upload request.")
    parser.add_argument("--index", default=None, help="Weaviate collection to index into.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")

    maildir = args.maildir or settings.maildir_path
    batch_size = args.batch_size if args.batch_size is not None else settings.batch_size
    email_parser = EnronEmailParser(encoding=settings.file_encoding)

    try:
        with EnronEmailRepository.connect(settings, collection_name=args.index) as repository:
            count = index_directory(maildir, repository, parser=email_parser, batch_size=batch_size)
    except Exception:
        logging.exception("Indexing %s failed", maildir)
        return 1

    logging.info("Indexed %s documents into %s.", count, args.index or settings.index_name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
