"""
Firestore score store: every document of the scores collection.

Used when DATA_SOURCE=firebase. Stored documents carry name, guesses, dnf,
isoDate and wordleNumber; ScoreRecord accepts those field names as aliases.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import firebase_admin
from firebase_admin import credentials, firestore
from google.api_core.exceptions import GoogleAPIError

from .score_store import ScoreStoreError

logger = logging.getLogger(__name__)


class FirestoreScoreStore:
    """
    Score store backed by a Firestore collection (default: scores).
    Document ID is auto-generated and not used by the engine.
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_path: Optional[Union[Path, str]] = None,
        collection: str = "scores",
    ):
        if not firebase_admin._apps:
            if credentials_path:
                cred = credentials.Certificate(str(Path(credentials_path).resolve()))
                opts = {"projectId": project_id} if project_id else None
                firebase_admin.initialize_app(cred, opts)
            else:
                firebase_admin.initialize_app(options={"projectId": project_id} if project_id else None)
        self._db = firestore.client()
        self._collection_name = collection
        self._coll = self._db.collection(collection)

    @property
    def collection(self) -> str:
        return self._collection_name

    def fetch_scores(self) -> List[Dict[str, Any]]:
        """Read the whole collection in one stream."""
        try:
            docs = list(self._coll.stream())
        except GoogleAPIError as e:
            logger.warning("[FirestoreScoreStore] read of %r failed: %s", self._collection_name, e)
            raise ScoreStoreError(f"Firestore read failed: {e}") from e
        out = []
        for doc in docs:
            d = doc.to_dict() or {}
            d["id"] = doc.id
            out.append(d)
        return out
