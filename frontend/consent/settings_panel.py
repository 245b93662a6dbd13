"""
Cookie settings panel logic.

Shows the current decision and lets the visitor take it back. The panel
never talks to the banner: clearing consent is enough for the banner to
schedule itself again.
"""

from typing import List, NamedTuple, Optional

from frontend.consent.context import ConsentContext
from frontend.consent.models import CookiePreferences
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

CATEGORY_LABELS = {
    "necessary": "Necessari",
    "analytics": "Analitici",
    "preferences": "Preferenze",
    "marketing": "Marketing",
}


class StatusRow(NamedTuple):
    category: str
    label: str
    enabled: bool


class ConsentSettingsPanel:
    def __init__(self, context: ConsentContext) -> None:
        self._context = context

    @property
    def preferences(self) -> Optional[CookiePreferences]:
        return self._context.preferences

    def status_rows(self) -> List[StatusRow]:
        """One row per category, empty when no decision is stored."""
        preferences = self.preferences
        if preferences is None:
            return []

        return [
            StatusRow(category, label, preferences.is_allowed(category))
            for category, label in CATEGORY_LABELS.items()
        ]

    def manage_cookies(self) -> None:
        """Reset consent so the banner asks again."""
        logger.info("Visitor asked to manage cookie preferences")
        self._context.clear_consent()
