"""
Cookie consent context.

Holds the consent state of one browser client, keeps it in sync with the
consent store and starts the third-party integrations the visitor allowed.
One instance is built per client and passed explicitly to the components
that need it.
"""

from typing import Callable, List, Mapping, Optional, Union

from frontend.consent.integrations import DEFAULT_INITIALIZERS, Initializer
from frontend.consent.models import ConsentRecord, CookiePreferences
from frontend.consent.store import ConsentStore
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

Listener = Callable[["ConsentContext"], None]


class ConsentContext:
    """
    Reactive consent state for a single client.

    Args:
        store: Storage for the consent record. The context is its only writer.
        initializers: Map of cookie category to the integration it enables.
    """

    def __init__(
        self,
        store: ConsentStore,
        initializers: Optional[Mapping[str, Initializer]] = None,
    ) -> None:
        self._store = store
        self._initializers = dict(
            DEFAULT_INITIALIZERS if initializers is None else initializers
        )
        self._preferences: Optional[CookiePreferences] = None
        self._has_consent = False
        self._listeners: List[Listener] = []
        self._initialized = False
        self._closed = False

    # --------------------
    # Lifecycle
    # --------------------
    def initialize(self) -> None:
        """
        Adopt a previously stored decision, if any.

        Runs once; later calls are ignored.
        """
        if self._initialized:
            return

        self._initialized = True
        record = self._store.load()

        if record is None:
            logger.debug("No stored cookie consent found")
            return

        self._preferences = record.preferences
        self._has_consent = True

        logger.info(
            "Stored cookie consent loaded",
            extra={"timestamp": record.timestamp},
        )
        self._run_initializers(record.preferences)

    def close(self) -> None:
        """Drop all listeners; the context stops notifying."""
        self._listeners.clear()
        self._closed = True

    # --------------------
    # State
    # --------------------
    @property
    def store(self) -> ConsentStore:
        return self._store

    @property
    def has_consent(self) -> bool:
        return self._has_consent

    @property
    def preferences(self) -> Optional[CookiePreferences]:
        return self._preferences

    def is_allowed(self, category: str) -> bool:
        if self._preferences is None:
            return False
        return self._preferences.is_allowed(category)

    @property
    def is_analytics_allowed(self) -> bool:
        return self.is_allowed("analytics")

    @property
    def is_marketing_allowed(self) -> bool:
        return self.is_allowed("marketing")

    @property
    def is_preferences_allowed(self) -> bool:
        return self.is_allowed("preferences")

    def has_stored_consent(self) -> bool:
        """Whether a valid consent record is currently in storage."""
        return self._store.has_record()

    # --------------------
    # Mutations
    # --------------------
    def update_consent(
        self,
        flags: Union[CookiePreferences, Mapping[str, bool]],
    ) -> ConsentRecord:
        """
        Persist a new decision and apply it.

        The record is written before the in-memory state changes and
        before listeners and integrations run.

        Returns:
            ConsentRecord: The record that was stored.
        """
        preferences = (
            flags
            if isinstance(flags, CookiePreferences)
            else CookiePreferences.model_validate(dict(flags))
        )
        record = ConsentRecord.create(preferences)

        self._store.save(record)
        self._preferences = preferences
        self._has_consent = True

        logger.info(
            "Cookie consent updated",
            extra={
                "analytics": preferences.analytics,
                "marketing": preferences.marketing,
                "preferences": preferences.preferences,
                "session_only": self._store.is_session_only,
            },
        )

        self._run_initializers(preferences)
        self._notify()
        return record

    def clear_consent(self) -> None:
        """Forget the decision; the banner will ask again."""
        self._store.clear()
        self._preferences = None
        self._has_consent = False

        logger.info("Cookie consent cleared")
        self._notify()

    # --------------------
    # Listeners
    # --------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every consent change.

        Returns:
            Callable that removes the listener.
        """
        if not self._closed:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:  # noqa: BLE001
                logger.exception("Consent listener failed")

    def _run_initializers(self, preferences: CookiePreferences) -> None:
        for category, initializer in self._initializers.items():
            if not preferences.is_allowed(category):
                continue

            try:
                initializer()
            except Exception:  # noqa: BLE001
                logger.exception(
                    "Consent integration failed to initialize",
                    extra={"category": category},
                )
