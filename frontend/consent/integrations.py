"""
Third-party integrations gated by cookie consent.

Each initializer takes no arguments and is only called by the consent
context when the matching category is allowed. Initializers may be
called again on every consent update and must tolerate that.
"""

import json
from typing import Callable, Dict, Optional, Set
from weakref import WeakKeyDictionary

from nicegui import ui

from frontend.config import settings
from frontend.utils.logger import get_logger

logger = get_logger(__name__)

Initializer = Callable[[], None]

_GTAG_SRC = "https://www.googletagmanager.com/gtag/js?id={measurement_id}"

_GTAG_INLINE = """
  window.dataLayer = window.dataLayer || [];
  function gtag(){{dataLayer.push(arguments);}}
  gtag('js', new Date());
  gtag('config', '{measurement_id}', {{ 'anonymize_ip': true }});
"""

_PIXEL_INLINE = """
  !function(f,b,e,v,n,t,s){{if(f.fbq)return;n=f.fbq=function(){{n.callMethod?
  n.callMethod.apply(n,arguments):n.queue.push(arguments)}};if(!f._fbq)f._fbq=n;
  n.push=n;n.loaded=!0;n.version='2.0';n.queue=[];t=b.createElement(e);t.async=!0;
  t.src=v;s=b.getElementsByTagName(e)[0];s.parentNode.insertBefore(t,s)}}(window,
  document,'script','https://connect.facebook.net/en_US/fbevents.js');
  fbq('init', '{pixel_id}');
  fbq('track', 'PageView');
"""

# Tags already injected, per connected client
_injected: "WeakKeyDictionary[object, Set[str]]" = WeakKeyDictionary()


def _head_html(src: Optional[str], inline: str) -> str:
    html = f'<script async src="{src}"></script>\n' if src else ""
    return f"{html}<script>{inline}</script>"


def _loader_js(src: Optional[str], inline: str) -> str:
    """
    JavaScript that appends the tag as real script elements.

    Scripts inserted as HTML into a live document do not execute.
    """
    lines = ["(() => {"]

    if src:
        lines += [
            "  const external = document.createElement('script');",
            "  external.async = true;",
            f"  external.src = {json.dumps(src)};",
            "  document.head.appendChild(external);",
        ]

    lines += [
        "  const inline = document.createElement('script');",
        f"  inline.text = {json.dumps(inline)};",
        "  document.head.appendChild(inline);",
        "})();",
    ]
    return "\n".join(lines)


def _inject_once(tag: str, inline: str, src: Optional[str] = None) -> None:
    client = ui.context.client
    tags = _injected.setdefault(client, set())

    if tag in tags:
        return

    if client.has_socket_connection:
        ui.run_javascript(_loader_js(src, inline))
    else:
        ui.add_head_html(_head_html(src, inline))

    tags.add(tag)
    logger.debug(
        "Injected consent-gated tag",
        extra={"tag": tag, "live": bool(client.has_socket_connection)},
    )


def init_analytics() -> None:
    """Enable analytics tooling."""
    logger.info("Analytics initialized")

    measurement_id = settings.ANALYTICS_MEASUREMENT_ID
    if measurement_id:
        _inject_once(
            "analytics",
            _GTAG_INLINE.format(measurement_id=measurement_id),
            src=_GTAG_SRC.format(measurement_id=measurement_id),
        )


def init_marketing() -> None:
    """Enable marketing tools (ads and conversion tracking)."""
    logger.info("Marketing tools initialized")

    if settings.MARKETING_PIXEL_ID:
        _inject_once(
            "marketing",
            _PIXEL_INLINE.format(pixel_id=settings.MARKETING_PIXEL_ID),
        )


def init_preference_features() -> None:
    """Enable features that remember visitor preferences."""
    logger.info("Preference features initialized")


DEFAULT_INITIALIZERS: Dict[str, Initializer] = {
    "analytics": init_analytics,
    "marketing": init_marketing,
    "preferences": init_preference_features,
}
