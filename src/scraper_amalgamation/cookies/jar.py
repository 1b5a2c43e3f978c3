"""Per-host cookie store with Netscape cookie-file import.

Netscape cookie files hold one cookie per line with seven tab-separated
fields::

    domain  include_subdomains  path  secure  expiry  name  value

Only ``domain``, ``name`` and ``value`` are kept.  Lines that are blank,
start with ``#`` or have fewer than seven fields are ignored.

Example
-------
>>> jar = CookieJar()
>>> jar.add_cookies("example.com", {"age_check": "1"})
>>> jar.get_cookies("https://example.com/page")
{'age_check': '1'}
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_NETSCAPE_FIELD_COUNT: int = 7


class CookieJar:
    """Cookies keyed by host name.

    Thread-safety is achieved with a threading.Lock since sources may
    scrape concurrently.
    """

    def __init__(self) -> None:
        self._store: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()

    def get_cookies(self, url: str) -> dict[str, str]:
        """Return a copy of the cookies stored for ``url``'s host.

        A host with no entry of its own falls back to the ``.host`` domain
        entry.  Unknown hosts yield an empty dict.
        """
        host = urlsplit(url).hostname or ""
        with self._lock:
            cookies = self._store.get(host)
            if cookies is None:
                cookies = self._store.get(f".{host}")
            return dict(cookies) if cookies is not None else {}

    def add_cookies(self, host: str, cookies: dict[str, str]) -> None:
        """Merge ``cookies`` into the entry for ``host``."""
        with self._lock:
            self._store.setdefault(host, {}).update(cookies)

    def load_cookie_jar(self, path: str | Path | None) -> int:
        """Import cookies from a Netscape-format file.

        A ``None`` path or a missing file is a no-op.

        Returns
        -------
        int
            Number of cookies imported.
        """
        if path is None:
            return 0
        path = Path(path)
        if not path.exists():
            logger.debug("Cookie jar %s does not exist; nothing imported", path)
            return 0

        imported = 0
        with path.open("r", encoding="utf-8", errors="replace") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                parts = line.split("\t")
                if len(parts) < _NETSCAPE_FIELD_COUNT:
                    continue
                domain, name, value = parts[0], parts[5], parts[6]
                with self._lock:
                    self._store.setdefault(domain, {})[name] = value
                imported += 1

        logger.info("Imported %d cookie(s) from %s", imported, path)
        return imported

    def hosts(self) -> list[str]:
        with self._lock:
            return sorted(self._store)

    def __len__(self) -> int:
        with self._lock:
            return sum(len(cookies) for cookies in self._store.values())
