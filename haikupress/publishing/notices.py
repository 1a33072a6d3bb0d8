# haikupress/publishing/notices.py

import html
import threading
import time
from typing import Callable, Dict, Optional, Tuple
from urllib.parse import unquote_plus, urlsplit, urlunsplit

EDITOR_NOTICE = (
    "Your post must follow the 5-7-5 haiku format. Please adjust the content to "
    "contain three lines with 5, 7, and 5 syllables respectively."
)


class NoticeStore:
    """
    Short-lived flash messages keyed by name.

    Carries a validation message across a redirect: the save request sets
    it and the next page view pops it. Entries expire after their TTL.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[str, Tuple[str, float]] = {}

    def set(self, key: str, message: str, ttl: float):
        with self._lock:
            self._entries[key] = (message, self._clock() + ttl)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            message, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return message

    def delete(self, key: str):
        with self._lock:
            self._entries.pop(key, None)

    def pop(self, key: str) -> Optional[str]:
        """Return the message for key, if still live, and remove it."""
        message = self.get(key)
        self.delete(key)
        return message


def render_admin_notice(message: str) -> str:
    """Render an error notice with the message HTML-escaped."""
    return (
        '<div class="notice notice-error is-dismissible"><p>'
        f'{html.escape(message)}'
        '</p></div>'
    )


def remove_query_arg(location: str, name: str) -> str:
    """Drop every occurrence of a query parameter, leaving the rest of the URL as written."""
    parts = urlsplit(location)
    if not parts.query:
        return location
    kept = [piece for piece in parts.query.split('&') if unquote_plus(piece.split('=', 1)[0]) != name]
    return urlunsplit(parts._replace(query='&'.join(kept)))
