"""
Home page UI.
"""

from nicegui import ui

from frontend.config import settings
from frontend.utils.helpers import get_service_color

SERVICES = [
    ("fisioterapia", "Fisioterapia", "Trattamenti manuali e strumentali."),
    ("osteopatia", "Osteopatia", "Approccio globale al benessere del corpo."),
    ("riabilitazione", "Riabilitazione", "Percorsi post-operatori e sportivi."),
    ("pilates", "Pilates", "Lezioni individuali e in piccoli gruppi."),
]


def show_home_page() -> None:
    """Render the studio introduction, services and contacts."""
    ui.label(
        "Centro di fisioterapia e riabilitazione a Genova"
    ).classes("text-lg text-gray-600")

    with ui.grid(columns=2).classes("w-full gap-4"):
        for category, title, description in SERVICES:
            with ui.card().classes(f"rounded-xl p-6 {get_service_color(category)}"):
                ui.label(title).classes("text-xl font-semibold")
                ui.label(description).classes("text-sm opacity-90")

    with ui.card().classes("w-full p-6"):
        ui.label("Contatti").classes("text-xl font-semibold mb-2")
        ui.label(settings.STUDIO_ADDRESS)
        ui.label(f"Tel. {settings.STUDIO_PHONE}")
        ui.link(settings.STUDIO_EMAIL, f"mailto:{settings.STUDIO_EMAIL}")
