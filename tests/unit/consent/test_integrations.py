from unittest.mock import MagicMock

from frontend.consent import integrations


def _fake_ui(*, connected: bool = False) -> MagicMock:
    fake_ui = MagicMock()
    fake_ui.context.client.has_socket_connection = connected
    return fake_ui


def test_default_table_covers_optional_categories():
    assert set(integrations.DEFAULT_INITIALIZERS) == {
        "analytics",
        "marketing",
        "preferences",
    }


def test_analytics_without_measurement_id_injects_nothing(monkeypatch):
    fake_ui = _fake_ui()
    monkeypatch.setattr(integrations, "ui", fake_ui)
    monkeypatch.setattr(integrations.settings, "ANALYTICS_MEASUREMENT_ID", None)

    integrations.init_analytics()

    fake_ui.add_head_html.assert_not_called()
    fake_ui.run_javascript.assert_not_called()


def test_analytics_tag_injected_once_per_client(monkeypatch):
    fake_ui = _fake_ui()
    monkeypatch.setattr(integrations, "ui", fake_ui)
    monkeypatch.setattr(integrations.settings, "ANALYTICS_MEASUREMENT_ID", "G-TEST123")

    integrations.init_analytics()
    integrations.init_analytics()

    fake_ui.add_head_html.assert_called_once()
    assert "G-TEST123" in fake_ui.add_head_html.call_args.args[0]


def test_analytics_on_connected_page_creates_script_elements(monkeypatch):
    fake_ui = _fake_ui(connected=True)
    monkeypatch.setattr(integrations, "ui", fake_ui)
    monkeypatch.setattr(integrations.settings, "ANALYTICS_MEASUREMENT_ID", "G-LIVE42")

    integrations.init_analytics()
    integrations.init_analytics()

    fake_ui.add_head_html.assert_not_called()
    fake_ui.run_javascript.assert_called_once()

    script = fake_ui.run_javascript.call_args.args[0]
    assert "document.createElement('script')" in script
    assert "https://www.googletagmanager.com/gtag/js?id=G-LIVE42" in script
    assert "insertAdjacentHTML" not in script


def test_marketing_pixel_injected(monkeypatch):
    fake_ui = _fake_ui()
    monkeypatch.setattr(integrations, "ui", fake_ui)
    monkeypatch.setattr(integrations.settings, "MARKETING_PIXEL_ID", "123456")

    integrations.init_marketing()

    assert "fbq('init', '123456')" in fake_ui.add_head_html.call_args.args[0]


def test_marketing_pixel_on_connected_page(monkeypatch):
    fake_ui = _fake_ui(connected=True)
    monkeypatch.setattr(integrations, "ui", fake_ui)
    monkeypatch.setattr(integrations.settings, "MARKETING_PIXEL_ID", "654321")

    integrations.init_marketing()

    script = fake_ui.run_javascript.call_args.args[0]
    assert "inline.text" in script
    assert "fbq('init', '654321')" in script


def test_preference_features_do_not_touch_the_page(monkeypatch):
    fake_ui = _fake_ui()
    monkeypatch.setattr(integrations, "ui", fake_ui)

    integrations.init_preference_features()

    fake_ui.add_head_html.assert_not_called()
    fake_ui.run_javascript.assert_not_called()
