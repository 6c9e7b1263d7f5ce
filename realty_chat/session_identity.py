"""Per-browser session identifier."""
import logging
from uuid import uuid4

from realty_chat.storage import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "sessionId"


class SessionIdentifierManager:
    """Reads the session identifier from a store, creating it on first use.

    The identifier is stable for as long as the store keeps the key. When
    the store fails, a fresh identifier is used for this page only.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY):
        self._store = store
        self._key = key
        self._session_id: str | None = None

    @property
    def session_id(self) -> str:
        """The current identifier, loading or creating it on first access."""
        if self._session_id is None:
            self._session_id = self._load_or_create()
        return self._session_id

    def _load_or_create(self) -> str:
        try:
            stored = self._store.get(self._key)
        except Exception as e:
            logger.warning(f"[SESSION] Storage read failed, using ephemeral id: {type(e).__name__}: {e}")
            return str(uuid4())

        if stored:
            logger.debug(f"[SESSION] Reusing session id {stored}")
            return stored

        session_id = str(uuid4())
        try:
            self._store.set(self._key, session_id)
            logger.info(f"[SESSION] Created session id {session_id}")
        except Exception as e:
            logger.warning(f"[SESSION] Storage write failed, id will not survive reload: {type(e).__name__}: {e}")
        return session_id
