"""
Cookie banner UI.

Renders the ConsentBanner state machine as a bottom overlay with a main
view and a per-category settings view.
"""

from typing import Callable

from nicegui import ui

from frontend.config import settings
from frontend.consent.banner import BannerState, Cancel, ConsentBanner
from frontend.consent.context import ConsentContext
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

COOKIE_TYPES = [
    {
        "key": "necessary",
        "title": "Cookie Necessari",
        "description": (
            "Essenziali per il funzionamento del sito web. "
            "Non possono essere disabilitati."
        ),
        "icon": "shield",
        "required": True,
    },
    {
        "key": "analytics",
        "title": "Cookie Analitici",
        "description": (
            "Ci aiutano a capire come i visitatori interagiscono "
            "con il nostro sito web."
        ),
        "icon": "visibility",
        "required": False,
    },
    {
        "key": "preferences",
        "title": "Cookie delle Preferenze",
        "description": (
            "Memorizzano le tue preferenze e personalizzano la tua esperienza."
        ),
        "icon": "settings",
        "required": False,
    },
    {
        "key": "marketing",
        "title": "Cookie di Marketing",
        "description": (
            "Utilizzati per tracciare i visitatori sui siti web "
            "per mostrare annunci pertinenti."
        ),
        "icon": "cookie",
        "required": False,
    },
]


def _timer_scheduler(
    container: ui.element,
) -> Callable[[float, Callable[[], None]], Cancel]:
    """Build a one-shot scheduler whose timers live in ``container``."""

    def schedule(delay: float, callback: Callable[[], None]) -> Cancel:
        with container:
            timer = ui.timer(delay, callback, once=True)
        return timer.cancel

    return schedule


def render_cookie_banner(context: ConsentContext) -> ConsentBanner:
    """
    Mount the cookie banner on the current page.

    Args:
        context: Consent context of the current client.

    Returns:
        ConsentBanner: The banner state machine driving the view.
    """
    container = ui.element("div")

    banner = ConsentBanner(
        context,
        schedule=_timer_scheduler(container),
        display_delay=settings.CONSENT_BANNER_DELAY_SECONDS,
    )

    @ui.refreshable
    def view() -> None:
        if not banner.is_visible:
            return

        with ui.element("div").classes(
            "fixed inset-0 bg-black/20 backdrop-blur-sm z-50 "
            "flex items-end justify-center p-4"
        ):
            with ui.card().classes(
                "max-w-4xl w-full max-h-[80vh] overflow-auto "
                "bg-white rounded-xl shadow-2xl p-6"
            ):
                if banner.state is BannerState.VISIBLE_SETTINGS:
                    _settings_view(banner)
                else:
                    _main_view(banner)

    with container:
        view()

    banner.on_change = view.refresh
    banner.start()

    logger.debug(
        "Cookie banner mounted",
        extra={"pending": banner.is_pending},
    )

    ui.context.client.on_disconnect(banner.teardown)

    return banner


def _main_view(banner: ConsentBanner) -> None:
    with ui.row().classes("w-full items-start justify-between no-wrap mb-4"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("cookie").classes("text-2xl text-primary")
            ui.label("Utilizziamo i cookie").classes(
                "text-xl font-semibold text-gray-900"
            )
        ui.button(icon="close", on_click=banner.dismiss).props(
            "flat round dense"
        ).classes("text-gray-500")

    ui.label(
        "Utilizziamo cookie tecnici e, con il tuo consenso, cookie analitici, "
        "di preferenza e di marketing per migliorare la tua esperienza."
    ).classes("text-gray-600 mb-4")

    with ui.row().classes("w-full bg-blue-50 rounded-lg p-3 mb-4 text-sm gap-1"):
        ui.label("Privacy Policy:").classes("text-blue-800 font-bold")
        ui.label(
            "Per maggiori informazioni su come utilizziamo i tuoi dati, "
            "consulta la nostra"
        ).classes("text-blue-800")
        ui.link(
            "Informativa sulla Privacy",
            settings.PRIVACY_POLICY_PATH,
        ).classes("text-blue-800 underline")

    with ui.row().classes("w-full gap-3"):
        ui.button(
            "Accetta tutti",
            icon="check",
            on_click=banner.accept_all,
        ).classes("flex-1")
        ui.button(
            "Rifiuta tutti",
            on_click=banner.reject_all,
        ).props("outline").classes("flex-1")
        ui.button(
            "Personalizza",
            icon="settings",
            on_click=banner.personalize,
        ).props("flat")


def _settings_view(banner: ConsentBanner) -> None:
    with ui.row().classes("w-full items-center justify-between no-wrap mb-6"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("settings").classes("text-2xl text-primary")
            ui.label("Impostazioni Cookie").classes(
                "text-xl font-semibold text-gray-900"
            )
        ui.button(icon="close", on_click=banner.back).props(
            "flat round dense"
        ).classes("text-gray-500")

    draft = banner.draft

    with ui.column().classes("w-full gap-4 mb-6"):
        for cookie_type in COOKIE_TYPES:
            key = cookie_type["key"]

            with ui.card().classes("w-full border border-gray-200 p-4"):
                with ui.row().classes("w-full items-start justify-between no-wrap"):
                    with ui.row().classes("items-start gap-3 no-wrap"):
                        ui.icon(cookie_type["icon"]).classes("text-xl text-primary")
                        with ui.column().classes("gap-1"):
                            ui.label(cookie_type["title"]).classes(
                                "font-medium text-gray-900"
                            )
                            ui.label(cookie_type["description"]).classes(
                                "text-sm text-gray-600"
                            )

                    switch = ui.switch(
                        value=draft.is_allowed(key),
                        on_change=lambda _, key=key: banner.toggle(key),
                    )
                    if cookie_type["required"]:
                        switch.disable()
                        ui.label("Sempre attivi").classes("text-xs text-gray-500")

    with ui.row().classes("w-full gap-3"):
        ui.button(
            "Salva preferenze",
            icon="check",
            on_click=banner.save_preferences,
        ).classes("flex-1")
        ui.button(
            "Accetta tutti",
            on_click=banner.accept_all,
        ).props("outline").classes("flex-1")
        ui.button("Indietro", on_click=banner.back).props("flat")
