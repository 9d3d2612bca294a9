"""
langswitch/lang/routes.py

Language switching. Stores the choice in the session and sends the
visitor back where they came from.
"""
import logging
from urllib.parse import urlparse

from flask import Blueprint, current_app, g, redirect, request, session, url_for
from flask_babel import refresh

from ..extensions import limiter
from .helpers import (
    apply_session_locale,
    available_locales,
    choose_locale,
    default_locale,
    persist_locale,
    session_store,
)

logger = logging.getLogger(__name__)

lang_bp = Blueprint("lang", __name__, url_prefix="/language")

lang_bp.before_app_request(apply_session_locale)


def _safe_referrer():
    """Referrer if it points back at this host, else None."""
    referrer = request.referrer
    if not referrer:
        return None

    parsed = urlparse(referrer)
    if parsed.scheme and parsed.scheme not in ("http", "https"):
        return None

    if parsed.netloc:
        if parsed.netloc.lower() != request.host.lower():
            return None
    # Relative referrers must be rooted paths; "//x" and "/\x" name other hosts
    elif not parsed.path.startswith("/") or parsed.path.startswith(("//", "/\\")):
        return None
    return referrer


@lang_bp.route("/<locale>")
@limiter.limit(lambda: current_app.config["LOCALE_RATE_LIMIT"])
def set_language(locale):
    locale = choose_locale(
        locale,
        available_locales().values(),
        default_locale(),
        strict=current_app.config["LOCALE_VALIDATE"],
    )

    g.locale = locale
    refresh()

    persist_locale(session_store(), locale)
    session.permanent = True  # survives browser close

    logger.debug("Locale set to %r", locale)
    return redirect(_safe_referrer() or url_for("main.welcome"))
