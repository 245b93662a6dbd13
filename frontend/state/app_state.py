"""
Per-client application state.

Each browser client gets its own consent context, wired to that
browser's persistent storage.
"""

from nicegui import app, ui

from frontend.config import settings
from frontend.consent.context import ConsentContext
from frontend.consent.store import ConsentStore
from frontend.utils.logger import get_logger

logger = get_logger(__name__)


def build_consent_context() -> ConsentContext:
    """
    Create and initialize the consent context for the current client.

    Must be called from inside a page builder.
    """
    store = ConsentStore(
        app.storage.user,
        key=settings.CONSENT_STORAGE_KEY,
    )

    context = ConsentContext(store)
    context.initialize()

    ui.context.client.on_disconnect(context.close)

    logger.debug(
        "Consent context ready",
        extra={"has_consent": context.has_consent},
    )
    return context
