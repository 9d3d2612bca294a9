"""
langswitch/lang/helpers.py

Locale resolution and persistence.

The active locale lives on flask.g for the duration of one request. It is
derived from the session value under SESSION_KEY, or DEFAULT_LOCALE when the
session holds nothing.

Usage:
    from ..lang.helpers import get_active_locale, session_store
"""
import logging

from flask import current_app, g, session

from .store import SessionStore

logger = logging.getLogger(__name__)

SESSION_KEY = "locale"


def session_store() -> SessionStore:
    """Wrap the current request's Flask session."""
    return SessionStore(session)


def default_locale() -> str:
    return current_app.config["DEFAULT_LOCALE"]


def available_locales() -> dict:
    """Label -> identifier mapping from config."""
    return current_app.config["AVAILABLE_LOCALES"]


# ── Resolver ───────────────────────────────────────────────────────────────────

def resolve_locale(store: SessionStore, default: str) -> str:
    """Return the stored locale, or `default` when the session has none."""
    if store.has(SESSION_KEY):
        return store.get(SESSION_KEY)
    return default


def apply_session_locale():
    """
    before_app_request hook. Sets g.locale from the session.
    Always returns None so the request carries on.
    """
    g.locale = resolve_locale(session_store(), default_locale())


def get_active_locale() -> str:
    return g.get("locale") or default_locale()


# ── Setter ─────────────────────────────────────────────────────────────────────

def choose_locale(locale: str, available, default: str, strict: bool) -> str:
    """
    Decide which identifier to store for a requested `locale`.

    With strict=False any string is accepted as-is. With strict=True an
    identifier outside `available` is replaced by `default`.
    """
    if not strict or locale in available:
        return locale

    logger.warning("Rejected unknown locale %r, using %r", locale, default)
    return default


def persist_locale(store: SessionStore, locale: str) -> None:
    store.put(SESSION_KEY, locale)


# ── Babel ──────────────────────────────────────────────────────────────────────

def babel_locale() -> str:
    """
    locale_selector for Flask-Babel.
    Unknown identifiers never reach Babel's parser; they render as the default.
    """
    locale = get_active_locale()
    if locale in available_locales().values():
        return locale
    return default_locale()
