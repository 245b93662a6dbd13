"""
Public site layout.

Wraps every public page with the header, the footer and the cookie
banner, and contains rendering failures of the page body.
"""

from typing import Callable

from nicegui import ui

from frontend.components.cookie_banner import render_cookie_banner
from frontend.config import settings
from frontend.consent.context import ConsentContext
from frontend.pages.error_page import show_error_fallback
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

NAV_LINKS = [
    ("Home", "/"),
    ("Privacy", settings.PRIVACY_POLICY_PATH),
    ("Cookie", "/cookie-settings"),
]


def site_layout(
    title: str,
    context: ConsentContext,
    content_fn: Callable[[], None],
) -> None:
    """
    Render a public page.

    Args:
        title: Page heading.
        context: Consent context of the current client.
        content_fn: Callback that renders the page body.
    """
    logger.debug("Rendering site layout", extra={"title": title})

    with ui.header().classes("bg-white text-gray-900 shadow-sm"):
        with ui.row().classes("w-full max-w-6xl mx-auto items-center justify-between"):
            ui.link(settings.STUDIO_NAME, "/").classes(
                "text-2xl font-bold text-primary no-underline"
            )
            with ui.row().classes("gap-6"):
                for label, target in NAV_LINKS:
                    ui.link(label, target).classes("text-gray-700 no-underline")

    with ui.column().classes("w-full max-w-6xl mx-auto p-6 gap-6"):
        ui.label(title).classes("text-3xl font-bold text-gray-900")

        try:
            content_fn()
        except Exception:  # noqa: BLE001
            logger.exception(
                "Failed to render page content",
                extra={"title": title},
            )
            show_error_fallback()

    with ui.footer().classes("bg-gray-900 text-gray-300"):
        with ui.row().classes("w-full max-w-6xl mx-auto justify-between text-sm"):
            ui.label(
                f"{settings.STUDIO_NAME} | {settings.STUDIO_ADDRESS} | "
                f"{settings.STUDIO_PHONE}"
            )
            ui.link(
                "Informativa sulla Privacy",
                settings.PRIVACY_POLICY_PATH,
            ).classes("text-gray-300")

    render_cookie_banner(context)
