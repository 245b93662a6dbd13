"""
Cookie settings card.

Displays the stored decision and lets the visitor reopen the banner.
"""

from nicegui import ui

from frontend.consent.context import ConsentContext
from frontend.consent.settings_panel import ConsentSettingsPanel


def render_cookie_settings(context: ConsentContext) -> ConsentSettingsPanel:
    panel = ConsentSettingsPanel(context)

    @ui.refreshable
    def view() -> None:
        with ui.card().classes("w-full bg-gray-50 rounded-lg p-4"):
            with ui.row().classes("items-center gap-3 mb-3"):
                ui.icon("cookie").classes("text-xl text-blue-600")
                ui.label("Impostazioni Cookie").classes(
                    "font-semibold text-gray-900"
                )

            rows = panel.status_rows()
            if rows:
                ui.label("Stato attuale delle tue preferenze:").classes(
                    "text-sm text-gray-600"
                )
                with ui.grid(columns=2).classes("w-full gap-2 text-xs mb-4"):
                    for row in rows:
                        colour = (
                            "bg-green-100 text-green-800"
                            if row.enabled
                            else "bg-red-100 text-red-800"
                        )
                        state = "Attivi" if row.enabled else "Disattivi"
                        ui.label(f"{row.label}: {state}").classes(
                            f"px-2 py-1 rounded {colour}"
                        )
            else:
                ui.label("Non hai ancora espresso una preferenza.").classes(
                    "text-sm text-gray-600 mb-4"
                )

            ui.button(
                "Modifica Preferenze Cookie",
                on_click=panel.manage_cookies,
            ).classes("w-full")

    view()
    context.subscribe(lambda _: view.refresh())

    return panel
