"""
NLP Text Record Service - Record Sinks

Storage backends accepting one TextRecord at a time.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from google.cloud import firestore
from schemas import TextRecord

# --- Logging ---
logger = logging.getLogger(__name__)


class RecordSink(ABC):
    """Write-only store for text records."""

    @abstractmethod
    def put(self, record: TextRecord) -> None:
        """Persist one record. Raises on failure."""


class FirestoreRecordSink(RecordSink):
    """
    Stores records as documents in a Firestore collection.

    Document ids are assigned by Firestore. The client is created on the
    first write and reused afterwards.
    """

    def __init__(
        self,
        collection: str,
        project: Optional[str] = None,
        client: Optional[firestore.Client] = None,
    ):
        self.collection = collection
        self.project = project or None
        self._client = client

    def get_db(self) -> firestore.Client:
        if self._client is None:
            self._client = firestore.Client(project=self.project)
            logger.info(f"initialized firestore client: collection={self.collection}")
        return self._client

    def put(self, record: TextRecord) -> None:
        _, doc_ref = self.get_db().collection(self.collection).add(record.model_dump())
        logger.debug(f"stored document: {self.collection}/{doc_ref.id}")
