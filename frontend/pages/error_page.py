"""
Generic error and not-found views.
"""

from nicegui import ui


def show_error_fallback() -> None:
    """Shown in place of page content that failed to render."""
    with ui.card().classes("w-full bg-red-50 border border-red-200 p-6"):
        ui.label("Si è verificato un errore").classes(
            "text-xl font-semibold text-red-800"
        )
        ui.label(
            "Qualcosa è andato storto. Ricarica la pagina o riprova più tardi."
        ).classes("text-red-700")
        ui.button(
            "Ricarica",
            on_click=lambda: ui.navigate.reload(),
        ).props("outline")


def show_not_found_page() -> None:
    """Standalone 404 view."""
    with ui.column().classes(
        "w-screen h-screen items-center justify-center bg-gray-50 gap-4"
    ):
        ui.label("404").classes("text-6xl font-bold text-primary")
        ui.label("Pagina non trovata").classes("text-2xl font-semibold")
        ui.label("La pagina che stai cercando non esiste o è stata spostata.").classes(
            "text-gray-600"
        )
        ui.button("Torna alla home", on_click=lambda: ui.navigate.to("/"))
