from frontend.consent.banner import BannerState, ConsentBanner
from frontend.consent.models import CookiePreferences
from frontend.consent.settings_panel import ConsentSettingsPanel


def test_no_rows_without_decision(context):
    panel = ConsentSettingsPanel(context)

    assert panel.preferences is None
    assert panel.status_rows() == []


def test_rows_reflect_current_preferences(context):
    context.update_consent(CookiePreferences(analytics=True))
    panel = ConsentSettingsPanel(context)

    rows = {row.category: row.enabled for row in panel.status_rows()}

    assert rows == {
        "necessary": True,
        "analytics": True,
        "preferences": False,
        "marketing": False,
    }


def test_manage_cookies_clears_consent(context, store):
    context.update_consent(CookiePreferences.all_accepted())
    panel = ConsentSettingsPanel(context)

    panel.manage_cookies()

    assert store.load() is None
    assert panel.preferences is None


def test_manage_cookies_reopens_banner(context, scheduler):
    banner = ConsentBanner(context, scheduler)
    banner.start()
    scheduler.fire_all()
    banner.reject_all()

    ConsentSettingsPanel(context).manage_cookies()
    scheduler.fire_all()

    assert banner.state is BannerState.VISIBLE_MAIN
