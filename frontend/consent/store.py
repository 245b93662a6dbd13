"""
Cookie consent storage.

Persists a single consent record under one key of a browser-scoped
mapping (NiceGUI ``app.storage.user`` in the running app).

Behavior:
- Corrupt entries are removed and reported as absent
- Unreadable storage is reported as absent
- Unwritable storage degrades to session-only memory
- NEVER raises to the caller
"""

from typing import Any, MutableMapping, Optional

from pydantic import ValidationError

from frontend.consent.models import ConsentRecord
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "cookieConsent"

_STORAGE_ERRORS = (RuntimeError, OSError, TypeError)


class ConsentStorageError(RuntimeError):
    """Raised when the consent storage backend cannot be written."""


class ConsentStore:
    """
    Load, save and clear the visitor's consent record.

    Args:
        backend: Mutable mapping that survives page reloads.
        key: Storage key holding the JSON encoded record.
    """

    def __init__(
        self,
        backend: MutableMapping[str, Any],
        key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._backend = backend
        self._key = key
        self._session_only = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def is_session_only(self) -> bool:
        """True once the store has fallen back to in-memory storage."""
        return self._session_only

    def load(self) -> Optional[ConsentRecord]:
        """
        Return the stored consent record, or None if there is none.
        """
        try:
            raw = self._backend.get(self._key)
        except _STORAGE_ERRORS as exc:
            logger.warning(
                "Consent storage unreadable, treating consent as absent",
                extra={"key": self._key, "error": str(exc)},
            )
            return None

        if raw is None:
            return None

        if not isinstance(raw, str):
            logger.warning(
                "Discarding consent entry with unexpected type",
                extra={"key": self._key, "type": type(raw).__name__},
            )
            self._discard()
            return None

        try:
            return ConsentRecord.from_json(raw)

        except ValidationError as exc:
            logger.warning(
                "Discarding corrupt consent record",
                extra={"key": self._key, "errors": exc.error_count()},
            )
            self._discard()
            return None

    def has_record(self) -> bool:
        return self.load() is not None

    def save(self, record: ConsentRecord) -> None:
        """
        Replace the stored record with ``record``.

        The record is serialized before the backend is touched and written
        with a single assignment.
        """
        payload = record.to_json()

        try:
            self._write(payload)
        except ConsentStorageError as exc:
            self._degrade(exc)
            self._backend[self._key] = payload

        logger.debug(
            "Consent record saved",
            extra={"key": self._key, "session_only": self._session_only},
        )

    def clear(self) -> None:
        """
        Delete the stored record. Clearing an absent record is a no-op.

        If the record cannot be removed it is ignored for the rest of the
        session; it will be read again on the next page load.
        """
        try:
            self._backend.pop(self._key, None)
        except _STORAGE_ERRORS as exc:
            logger.warning(
                "Unable to remove stored consent, revocation holds for this session only",
                extra={"key": self._key, "error": str(exc)},
            )
            self._degrade(ConsentStorageError(str(exc)))

        logger.debug("Consent record cleared", extra={"key": self._key})

    def _write(self, payload: str) -> None:
        try:
            self._backend[self._key] = payload
        except _STORAGE_ERRORS as exc:
            raise ConsentStorageError("Unable to write consent record") from exc

    def _discard(self) -> None:
        try:
            self._backend.pop(self._key, None)
        except _STORAGE_ERRORS as exc:
            logger.warning(
                "Failed to remove corrupt consent record",
                extra={"key": self._key, "error": str(exc)},
            )

    def _degrade(self, exc: Exception) -> None:
        if not self._session_only:
            logger.warning(
                "Consent storage unavailable, keeping consent for this session only",
                extra={"key": self._key, "error": str(exc)},
            )
        self._backend = {}
        self._session_only = True
