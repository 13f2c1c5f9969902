import hashlib
import threading
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set
from urllib.parse import urljoin, urlsplit

import requests

from ..config import ALLOWED_DOMAINS, CACHE_DIR, HTTP_TIMEOUT, USER_AGENT

REDIRECT_STATUSES = (301, 302, 303, 307, 308)
MAX_REDIRECTS = 6

# ------------------------------------------------------------------------------
# Raw landing for IMDb pages.
#
# Every page we fetch is written to a local cache directory keyed by its URL,
# and a later run replays the cached HTML instead of re-hitting the site. The
# listing and profile agents point at the same directory, so a page is only
# ever downloaded once no matter which agent asked for it.
#
# There is no expiry: delete the cache directory to force fresh pages.
# ------------------------------------------------------------------------------


class PageCache:
    def __init__(self, cache_dir: Path = CACHE_DIR):
        self.cache_dir = Path(cache_dir)

    def path_for(self, url: str) -> Path:
        key = hashlib.sha1(url.encode("utf-8")).hexdigest()
        return self.cache_dir / key[:2] / f"{key}.html"

    def get(self, url: str) -> Optional[str]:
        path = self.path_for(url)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def put(self, url: str, html: str) -> Path:
        path = self.path_for(url)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        return path


def make_session() -> requests.Session:
    s = requests.Session()
    s.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
    )
    return s


class FetchAgent:
    """
    Fetches one category of IMDb page (search listings or name pages).

    An agent only talks to hosts on its allow-list and never requests the
    same URL twice. Siblings made with clone() share the allow-list, the
    page cache and the HTTP session, but keep their own visited set.
    """

    def __init__(
        self,
        name: str,
        allowed_domains: Iterable[str] = ALLOWED_DOMAINS,
        cache: Optional[PageCache] = None,
        session: Optional[requests.Session] = None,
        timeout: float = HTTP_TIMEOUT,
    ):
        self.name = name
        self.allowed_domains = tuple(d.lower() for d in allowed_domains)
        self.cache = cache if cache is not None else PageCache()
        self.session = session if session is not None else make_session()
        self.timeout = timeout
        self._visited: Set[str] = set()
        self._lock = threading.Lock()
        self._request_hooks: List[Callable[[str], None]] = []

    def clone(self, name: str) -> "FetchAgent":
        return FetchAgent(
            name,
            allowed_domains=self.allowed_domains,
            cache=self.cache,
            session=self.session,
            timeout=self.timeout,
        )

    def on_request(self, callback: Callable[[str], None]) -> None:
        self._request_hooks.append(callback)

    def is_allowed(self, url: str) -> bool:
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https"):
            return False
        return (parts.hostname or "").lower() in self.allowed_domains

    def has_visited(self, url: str) -> bool:
        with self._lock:
            return url in self._visited

    def _claim(self, url: str) -> bool:
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def fetch(self, url: str) -> Optional[str]:
        """
        Return the HTML for `url`, from the cache when we have it.

        Returns None for hosts outside the allow-list, for URLs this agent
        already visited, and for pages that redirect off the allow-list. HTTP and connection errors raise
        requests.RequestException; nothing is cached for them.
        """
        if not self.is_allowed(url):
            print(f"[SKIP] {self.name}: {url} is outside {self.allowed_domains}")
            return None
        if not self._claim(url):
            return None

        for hook in self._request_hooks:
            hook(url)

        cached = self.cache.get(url)
        if cached is not None:
            return cached

        html = self._get(url)
        if html is None:
            return None
        self.cache.put(url, html)
        return html

    def _get(self, url: str) -> Optional[str]:
        # Redirects are followed by hand so every hop is checked against the
        # allow-list before it is requested.
        current = url
        for _ in range(MAX_REDIRECTS + 1):
            resp = self.session.get(current, timeout=self.timeout, allow_redirects=False)
            if resp.status_code not in REDIRECT_STATUSES:
                resp.raise_for_status()
                return resp.text

            location = (resp.headers.get("Location") or "").strip()
            if not location:
                resp.raise_for_status()
                return resp.text

            nxt = urljoin(current, location)
            if not self.is_allowed(nxt):
                print(f"[SKIP] {self.name}: {url} redirects to {nxt}, outside {self.allowed_domains}")
                return None
            current = nxt

        raise requests.TooManyRedirects(f"too many redirects: {url}")
