"""
Cookie consent data model.

Defines the category flags a visitor can allow and the record that is
persisted in the browser storage once a decision has been made.
"""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

CONSENT_VERSION = "1.0"

OPTIONAL_CATEGORIES = ("analytics", "marketing", "preferences")


class CookiePreferences(BaseModel):
    """
    Cookie categories allowed by the visitor.

    ``necessary`` is always True: whatever value is supplied, the
    stored and in-memory flags keep the strictly necessary cookies on.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    necessary: bool = True
    analytics: bool = False
    marketing: bool = False
    preferences: bool = False

    @field_validator("necessary", mode="before")
    @classmethod
    def _force_necessary(cls, value: object) -> bool:
        return True

    @classmethod
    def all_accepted(cls) -> "CookiePreferences":
        return cls(analytics=True, marketing=True, preferences=True)

    @classmethod
    def only_necessary(cls) -> "CookiePreferences":
        return cls()

    def is_allowed(self, category: str) -> bool:
        """Return the flag for ``category``; unknown names are never allowed."""
        if category == "necessary" or category in OPTIONAL_CATEGORIES:
            return bool(getattr(self, category))
        return False

    def toggled(self, category: str) -> "CookiePreferences":
        """
        Return a copy with one optional category flipped.

        Toggling ``necessary`` returns the flags unchanged.

        Raises:
            ValueError: If ``category`` is not a known cookie category.
        """
        if category == "necessary":
            return self

        if category not in OPTIONAL_CATEGORIES:
            raise ValueError(f"Unknown cookie category: {category}")

        return self.model_copy(update={category: not getattr(self, category)})


class _StoredPreferences(BaseModel):
    """Stored flags: every category must be present."""

    model_config = ConfigDict(strict=True)

    necessary: bool
    analytics: bool
    marketing: bool
    preferences: bool


class _StoredRecord(BaseModel):
    model_config = ConfigDict(strict=True)

    preferences: _StoredPreferences
    timestamp: str
    version: Literal["1.0"]


class ConsentRecord(BaseModel):
    """
    A single consent decision as persisted in browser storage.

    A new decision always produces a new record that fully replaces the
    previous one.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    preferences: CookiePreferences
    timestamp: str
    version: Literal["1.0"] = CONSENT_VERSION

    @field_validator("timestamp")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        try:
            datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValueError("timestamp must be an ISO-8601 string") from exc
        return value

    @classmethod
    def create(
        cls,
        preferences: CookiePreferences,
        now: Optional[datetime] = None,
    ) -> "ConsentRecord":
        """
        Build a record stamped with the current UTC time.

        The timestamp uses the browser ``toISOString()`` shape,
        e.g. ``2025-03-03T09:30:00.000Z``.
        """
        moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
        timestamp = moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        return cls(
            preferences=preferences,
            timestamp=timestamp,
            version=CONSENT_VERSION,
        )

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str) -> "ConsentRecord":
        """
        Parse a stored record.

        All four flags, the timestamp and the version must be present;
        nothing is filled in from defaults.

        Raises:
            pydantic.ValidationError: If the payload is not a valid record.
        """
        stored = _StoredRecord.model_validate_json(payload)

        return cls(
            preferences=CookiePreferences(**stored.preferences.model_dump()),
            timestamp=stored.timestamp,
            version=stored.version,
        )
