"""
Cookie banner state machine.

Decides when the banner is shown and turns the visitor's choices into
consent updates. Rendering lives in ``frontend.components.cookie_banner``.

States:
    HIDDEN -> VISIBLE_MAIN       after the display delay, if nothing is stored
    VISIBLE_MAIN -> HIDDEN       accept all / reject all / dismiss
    VISIBLE_MAIN -> VISIBLE_SETTINGS   personalize
    VISIBLE_SETTINGS -> HIDDEN   save preferences / accept all
    VISIBLE_SETTINGS -> VISIBLE_MAIN   back

Dismissing does not store anything, so the banner comes back on the
next page load.
"""

from enum import Enum
from typing import Callable, Optional

from frontend.consent.context import ConsentContext
from frontend.consent.models import CookiePreferences
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

Cancel = Callable[[], None]
Scheduler = Callable[[float, Callable[[], None]], Cancel]

DEFAULT_DISPLAY_DELAY = 1.0


class BannerState(str, Enum):
    HIDDEN = "hidden"
    VISIBLE_MAIN = "visible_main"
    VISIBLE_SETTINGS = "visible_settings"


class ConsentBanner:
    """
    Interaction state of the cookie banner for one page.

    Args:
        context: Consent context the decisions are committed to.
        schedule: ``schedule(delay, callback)`` starts a one-shot timer
            and returns a function cancelling it.
        display_delay: Seconds to wait before the banner appears.
        on_change: Called after every state or draft change.
    """

    def __init__(
        self,
        context: ConsentContext,
        schedule: Scheduler,
        display_delay: float = DEFAULT_DISPLAY_DELAY,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self._context = context
        self._schedule = schedule
        self._display_delay = display_delay
        self.on_change = on_change

        self._state = BannerState.HIDDEN
        self._draft = self._committed_or_default()
        self._cancel_timer: Optional[Cancel] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def state(self) -> BannerState:
        return self._state

    @property
    def draft(self) -> CookiePreferences:
        return self._draft

    @property
    def is_visible(self) -> bool:
        return self._state is not BannerState.HIDDEN

    @property
    def is_pending(self) -> bool:
        """True while the appearance timer is running."""
        return self._cancel_timer is not None

    # --------------------
    # Lifecycle
    # --------------------
    def start(self) -> None:
        """Page loaded: schedule the banner if no decision is stored."""
        if self._unsubscribe is None:
            self._unsubscribe = self._context.subscribe(self._on_consent_changed)

        self._schedule_if_needed()

    def reveal(self) -> None:
        """Timer target: show the main banner unless consent appeared meanwhile."""
        self._cancel_timer = None

        if self._state is not BannerState.HIDDEN:
            return

        if self._context.has_stored_consent():
            logger.debug("Consent stored before banner display, staying hidden")
            return

        self._draft = self._committed_or_default()
        self._set_state(BannerState.VISIBLE_MAIN)

    def teardown(self) -> None:
        """Cancel a pending appearance and stop listening for changes."""
        self._stop_timer()

        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # --------------------
    # Events
    # --------------------
    def accept_all(self) -> None:
        if not self._expect(BannerState.VISIBLE_MAIN, BannerState.VISIBLE_SETTINGS):
            return
        self._commit(CookiePreferences.all_accepted())

    def reject_all(self) -> None:
        if not self._expect(BannerState.VISIBLE_MAIN):
            return
        self._commit(CookiePreferences.only_necessary())

    def personalize(self) -> None:
        if not self._expect(BannerState.VISIBLE_MAIN):
            return
        self._draft = self._committed_or_default()
        self._set_state(BannerState.VISIBLE_SETTINGS)

    def dismiss(self) -> None:
        if not self._expect(BannerState.VISIBLE_MAIN):
            return
        logger.info("Cookie banner dismissed without a decision")
        self._set_state(BannerState.HIDDEN)

    def toggle(self, category: str) -> None:
        """
        Flip an optional category in the draft.

        ``necessary`` cannot be toggled.
        """
        if not self._expect(BannerState.VISIBLE_SETTINGS):
            return

        toggled = self._draft.toggled(category)
        if toggled is self._draft:
            return

        self._draft = toggled
        self._changed()

    def save_preferences(self) -> None:
        if not self._expect(BannerState.VISIBLE_SETTINGS):
            return
        self._commit(self._draft)

    def back(self) -> None:
        if not self._expect(BannerState.VISIBLE_SETTINGS):
            return
        self._draft = self._committed_or_default()
        self._set_state(BannerState.VISIBLE_MAIN)

    # --------------------
    # Internals
    # --------------------
    def _commit(self, preferences: CookiePreferences) -> None:
        # The store write completes inside update_consent, before hiding.
        self._context.update_consent(preferences)
        self._draft = self._committed_or_default()
        self._set_state(BannerState.HIDDEN)

    def _on_consent_changed(self, context: ConsentContext) -> None:
        if self._state is BannerState.HIDDEN:
            self._schedule_if_needed()

    def _schedule_if_needed(self) -> None:
        if self._state is not BannerState.HIDDEN or self.is_pending:
            return

        if self._context.has_stored_consent():
            return

        logger.debug(
            "Scheduling cookie banner",
            extra={"delay_seconds": self._display_delay},
        )
        self._cancel_timer = self._schedule(self._display_delay, self.reveal)

    def _stop_timer(self) -> None:
        if self._cancel_timer is not None:
            self._cancel_timer()
            self._cancel_timer = None

    def _committed_or_default(self) -> CookiePreferences:
        return self._context.preferences or CookiePreferences.only_necessary()

    def _expect(self, *states: BannerState) -> bool:
        if self._state in states:
            return True

        logger.debug(
            "Ignoring banner event in current state",
            extra={"state": self._state.value},
        )
        return False

    def _set_state(self, state: BannerState) -> None:
        self._state = state
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
