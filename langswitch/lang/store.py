"""
langswitch/lang/store.py

Explicit key-value handle over a client's session.
The resolver and the setter take one of these as a parameter rather than
touching flask.session directly, so both work against a plain dict in tests.
"""
from collections.abc import MutableMapping


class SessionStore:
    def __init__(self, backend: MutableMapping):
        self._backend = backend

    def has(self, key: str) -> bool:
        """True when the key exists and holds a non-None value."""
        return self._backend.get(key) is not None

    def get(self, key: str, default=None):
        return self._backend.get(key, default)

    def put(self, key: str, value) -> None:
        self._backend[key] = value

    def __repr__(self):
        return f"<SessionStore {type(self._backend).__name__}>"
