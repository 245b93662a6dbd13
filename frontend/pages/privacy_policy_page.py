"""
Privacy policy page UI.

Explains the cookie categories and embeds the cookie settings card.
"""

from nicegui import ui

from frontend.components.cookie_settings import render_cookie_settings
from frontend.config import settings
from frontend.consent.context import ConsentContext

COOKIE_CATEGORIES = [
    ("shield", "Cookie Necessari", "Essenziali per il funzionamento del sito", "green"),
    ("visibility", "Cookie Analitici", "Per analizzare l'utilizzo del sito", "blue"),
    ("settings", "Cookie di Preferenza", "Per ricordare le tue preferenze", "purple"),
    ("cookie", "Cookie di Marketing", "Per mostrare contenuti personalizzati", "orange"),
]

GDPR_RIGHTS = [
    ("Accesso", "Richiedere copia dei tuoi dati"),
    ("Rettifica", "Correggere dati inesatti"),
    ("Cancellazione", "Richiedere la rimozione dei dati"),
    ("Limitazione", "Limitare il trattamento"),
    ("Portabilità", "Trasferire i dati ad altro servizio"),
    ("Opposizione", "Opporti al trattamento"),
]


def show_privacy_policy_page(context: ConsentContext) -> None:
    ui.label(
        "La tua privacy è importante per noi. Scopri come proteggiamo i tuoi dati."
    ).classes("text-lg text-gray-600")

    # -------- COOKIE --------
    ui.label("Utilizzo dei Cookie").classes("text-2xl font-bold text-gray-900")
    ui.label(
        "Il nostro sito utilizza cookie per migliorare la tua esperienza di "
        "navigazione. Puoi gestire le tue preferenze sui cookie attraverso il "
        "banner che appare al primo accesso al sito."
    ).classes("text-gray-700")

    with ui.grid(columns=4).classes("w-full gap-4"):
        for icon, title, description, colour in COOKIE_CATEGORIES:
            with ui.card().classes(
                f"bg-{colour}-50 border border-{colour}-200 rounded-lg p-4"
            ):
                ui.icon(icon).classes(f"text-xl text-{colour}-600")
                ui.label(title).classes("font-semibold text-gray-900")
                ui.label(description).classes("text-sm text-gray-600")

    render_cookie_settings(context)

    # -------- GDPR --------
    ui.label("I Tuoi Diritti (GDPR)").classes("text-2xl font-bold text-gray-900")
    with ui.card().classes("w-full bg-yellow-50 border border-yellow-200 p-6"):
        for right, description in GDPR_RIGHTS:
            ui.label(f"{right}: {description}").classes("text-gray-700")

    ui.label(
        f"Per esercitare i tuoi diritti scrivi a {settings.STUDIO_EMAIL}."
    ).classes("text-gray-700")


def show_cookie_settings_page(context: ConsentContext) -> None:
    ui.label(
        "Qui puoi vedere e modificare le tue preferenze sui cookie."
    ).classes("text-gray-600")
    render_cookie_settings(context)
