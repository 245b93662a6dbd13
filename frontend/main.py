"""
Application entrypoint and route definitions.

Registers all frontend pages and starts the NiceGUI app.
"""

from fastapi import Request
from fastapi.responses import Response
from nicegui import Client, app, ui
from nicegui.page import page

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from frontend.config import settings
from frontend.layouts.site_layout import site_layout
from frontend.pages.error_page import show_not_found_page
from frontend.pages.home_page import show_home_page
from frontend.pages.privacy_policy_page import (
    show_cookie_settings_page,
    show_privacy_policy_page,
)
from frontend.state.app_state import build_consent_context
from frontend.utils.logger import get_logger

logger = get_logger(__name__)


@ui.page("/")
def home() -> None:
    """Home page route."""
    logger.debug("Home page accessed")
    context = build_consent_context()
    site_layout(settings.STUDIO_NAME, context, show_home_page)


@ui.page(settings.PRIVACY_POLICY_PATH)
def privacy_policy() -> None:
    """Privacy policy route."""
    logger.debug("Privacy policy page accessed")
    context = build_consent_context()
    site_layout(
        "Informativa sulla Privacy",
        context,
        lambda: show_privacy_policy_page(context),
    )


@ui.page("/cookie-settings")
def cookie_settings() -> None:
    """Cookie settings route."""
    logger.debug("Cookie settings page accessed")
    context = build_consent_context()
    site_layout(
        "Impostazioni Cookie",
        context,
        lambda: show_cookie_settings_page(context),
    )


@app.get("/health")
def health_check() -> dict:
    return {
        "status": "ok",
        "env": settings.ENV,
    }


@app.exception_handler(404)
async def not_found_handler(request: Request, exc: Exception) -> Response:
    logger.info("Page not found", extra={"path": request.url.path})

    with Client(page(""), request=request) as client:
        show_not_found_page()

    return client.build_response(request, 404)


def _report_exception(exc: Exception) -> None:
    logger.error(
        "Unhandled frontend exception",
        extra={"error": str(exc), "error_type": type(exc).__name__},
    )
    if settings.ENV == "prod":
        sentry_sdk.capture_exception(exc)


app.on_exception(_report_exception)


def _init_sentry() -> None:
    if settings.ENV != "prod" or not settings.SENTRY_DSN:
        return

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        integrations=[
            FastApiIntegration(),
            StarletteIntegration(),
        ],
        traces_sample_rate=0.1,
        environment=settings.ENV,
    )
    logger.info("Sentry initialized for error tracking")


def start_app() -> None:
    """
    Start the NiceGUI application.
    """
    logger.info("Starting Kinetica frontend application")

    _init_sentry()

    ui.run(
        title=settings.STUDIO_NAME,
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        storage_secret=settings.STORAGE_SECRET,
    )


if __name__ == "__main__":
    start_app()
