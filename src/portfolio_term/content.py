from __future__ import annotations

import json
import threading
import urllib.request
from pathlib import Path
from typing import TYPE_CHECKING

from portfolio_term.types import ContentSnapshot

if TYPE_CHECKING:
    from portfolio_term.debug_log import DebugLogger


def resolve_source(source: str) -> str:
    """Turn a content source into a URL urllib can open.

    Anything with a scheme is used as-is; everything else is a filesystem
    path, relative to the working directory.
    """
    if "://" in source:
        return source
    return Path(source).expanduser().resolve().as_uri()


class ContentRepository:
    """Holds the portfolio content snapshot, fetched once in the background.

    The snapshot is absent until the fetch succeeds and never changes after
    that. A failed fetch is logged once and not retried; the repository then
    stays empty for the rest of the session. A malformed field only drops
    that field and is recorded in ``warnings``.
    """

    def __init__(self, source: str, logger: "DebugLogger | None" = None):
        self.source = source
        self.logger = logger
        self.error: str | None = None
        self.warnings: list[str] = []  # malformed fields dropped from the snapshot
        self._snapshot: ContentSnapshot | None = None
        self._thread: threading.Thread | None = None

    @property
    def ready(self) -> bool:
        return self._snapshot is not None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def current(self) -> ContentSnapshot | None:
        return self._snapshot

    def load(self) -> threading.Thread:
        """Start the one-time fetch on a daemon thread and return it."""
        if self._thread is None:
            self._thread = threading.Thread(
                target=self.fetch, name="content-fetch", daemon=True
            )
            self._thread.start()
        return self._thread

    def fetch(self) -> ContentSnapshot | None:
        if self._snapshot is not None or self.error is not None:
            return self._snapshot
        url = resolve_source(self.source)
        self._log(f"Loading content from {url}")
        try:
            req = urllib.request.Request(url, headers={"Accept": "application/json"})
            with urllib.request.urlopen(req) as resp:
                data = json.loads(resp.read())
            snapshot = ContentSnapshot.from_dict(data, on_error=self._warn)
        except (OSError, ValueError) as e:
            self.error = str(e)
            self._log(f"Error loading content: {e}", error=True)
            return None
        self._snapshot = snapshot
        self._log("Content loaded")
        return snapshot

    def _warn(self, message: str):
        self.warnings.append(message)
        self._log(message, error=True)

    def _log(self, message: str, error: bool = False):
        if not self.logger:
            return
        if error:
            self.logger.log_error(message)
        else:
            self.logger.log_diag(message)
