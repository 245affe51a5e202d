# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-29
# Updated: 2026-10-17
# Description: KBDocumentLoader.py
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import settings
from document.KBDocument import KBDocument
from loader.types import KBRecordModel
from utility.logging_utils import get_class_logger


class KBDocumentLoader:
    """
    Reads the local knowledge-base directory into memory.

    Every file with a recognised extension directly inside `directory` is
    parsed as a JSON record and its `data` field becomes the document content.
    A file that cannot be read or parsed becomes an empty document; it never
    aborts the load.
    """

    def __init__(
        self,
        directory: str | Path,
        *,
        extensions: Iterable[str] = settings.DOCUMENT_EXTENSIONS,
        logger: logging.Logger | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.extensions = tuple(e.lower() for e in extensions)
        self.logger = logger or get_class_logger(self.__class__)
        self.logger.info(
            "KBDocumentLoader initialised (directory=%s, extensions=%s)",
            self.directory,
            ",".join(self.extensions),
        )

    def list_files(self) -> List[Path]:
        if not self.directory.is_dir():
            raise FileNotFoundError(f"Knowledge-base directory not found: {self.directory}")

        return sorted(
            p for p in self.directory.iterdir()
            if p.is_file() and p.name.lower().endswith(self.extensions)
        )

    def load_document(self, path: Path) -> KBDocument:
        try:
            record = KBRecordModel.model_validate_json(path.read_text(encoding="utf-8"))
            return KBDocument(filename=path.name, content=record.data)
        except Exception as e:
            self.logger.error("Error loading %s: %s", path.name, e)
            return KBDocument(filename=path.name, content="")

    def load_documents(self) -> List[KBDocument]:
        documents = [self.load_document(p) for p in self.list_files()]

        self.logger.info("Loaded %d documents from %s", len(documents), self.directory)
        for doc in documents:
            self.logger.debug("document: %s (%d chars)", doc.filename, len(doc.content))

        return documents
