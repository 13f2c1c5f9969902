"""
Crawl orchestration for the IMDb birthday listing.

The crawl is an explicit FIFO work queue seeded with the first search page:
- a listing target is fetched and walked; its profile links and its "Next"
  link are queued in the order they were found
- consecutive profile targets are drained as one batch, either one by one or
  through a thread pool, and each matching name page yields one Star

The loop in StarCrawler.crawl() is the only writer of the result list, so
records come back in listing-page discovery order whatever the worker count.
"""

from __future__ import annotations

from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import Deque, List, Optional, Set

import requests

from . import config
from .extract.extract_name_page import parse_name_page_html
from .extract.extract_search_page import extract_search_page, targets_from_links
from .landing.imdb_fetch import FetchAgent, PageCache
from .models import LISTING, PROFILE, CrawlTarget, Star


def build_search_url(month: int, day: int) -> str:
    return config.SEARCH_URL_TEMPLATE.format(month=month, day=day)


def print_visit(url: str) -> None:
    print(f"Visiting: {url}")


class StarCrawler:
    def __init__(
        self,
        listing_agent: FetchAgent,
        profile_agent: Optional[FetchAgent] = None,
        max_workers: int = 1,
        max_listing_pages: int = -1,
    ):
        self.listing_agent = listing_agent
        if profile_agent is None:
            profile_agent = listing_agent.clone("profile")
            profile_agent.on_request(print_visit)
        self.profile_agent = profile_agent
        self.max_workers = max(1, max_workers)
        self.max_listing_pages = max_listing_pages

    def crawl(self, start_url: str) -> List[Star]:
        stars: List[Star] = []
        queue: Deque[CrawlTarget] = deque([CrawlTarget(url=start_url, role=LISTING)])
        queued_listings: Set[str] = {start_url}
        listing_pages = 0

        while queue:
            target = queue.popleft()

            if target.role == LISTING:
                if 0 < self.max_listing_pages <= listing_pages:
                    print(f"[SKIP] listing page cap reached ({self.max_listing_pages}), not visiting {target.url}")
                    continue
                listing_pages += 1
                for nxt in self._visit_listing(target):
                    if nxt.role == LISTING:
                        # a "Next" link pointing back at a page we have seen ends the walk
                        if nxt.url in queued_listings:
                            continue
                        queued_listings.add(nxt.url)
                    queue.append(nxt)
                continue

            batch = [target]
            while queue and queue[0].role == PROFILE:
                batch.append(queue.popleft())
            for star in self._visit_profiles(batch):
                if star is not None:
                    stars.append(star)

        return stars

    def _visit_listing(self, target: CrawlTarget) -> List[CrawlTarget]:
        try:
            html = self.listing_agent.fetch(target.url)
        except requests.RequestException as e:
            print(f"[WARN] Failed to fetch listing page {target.url}: {e}")
            return []
        if html is None:
            return []

        out: List[CrawlTarget] = []
        for t in targets_from_links(extract_search_page(html, target.url)):
            agent = self.listing_agent if t.role == LISTING else self.profile_agent
            if not agent.is_allowed(t.url):
                print(f"[SKIP] Off-site link ignored: {t.url}")
                continue
            out.append(t)
        return out

    def _visit_profile(self, target: CrawlTarget) -> Optional[Star]:
        try:
            html = self.profile_agent.fetch(target.url)
        except requests.RequestException as e:
            print(f"[WARN] Failed to fetch name page {target.url}: {e}")
            return None
        if html is None:
            return None
        return parse_name_page_html(html)

    def _visit_profiles(self, batch: List[CrawlTarget]) -> List[Optional[Star]]:
        if self.max_workers == 1 or len(batch) == 1:
            return [self._visit_profile(t) for t in batch]
        with ThreadPoolExecutor(max_workers=self.max_workers) as ex:
            # map() yields in submission order, which keeps discovery order
            return list(ex.map(self._visit_profile, batch))


def crawl_birthday(
    month: int,
    day: int,
    session: Optional[requests.Session] = None,
    cache: Optional[PageCache] = None,
    max_workers: int = config.MAX_WORKERS,
    max_listing_pages: int = config.MAX_LISTING_PAGES,
) -> List[Star]:
    """
    Crawl every star born on month/day and return their records.

    Blocks until all listing and name pages have been handled. An empty list
    means nothing matched; failed pages are logged, not raised.
    """
    start_url = build_search_url(month, day)
    print(f"Starting crawl at {start_url}")

    listing_agent = FetchAgent(
        "listing",
        allowed_domains=config.ALLOWED_DOMAINS,
        cache=cache if cache is not None else PageCache(config.CACHE_DIR),
        session=session,
        timeout=config.HTTP_TIMEOUT,
    )
    crawler = StarCrawler(
        listing_agent,
        max_workers=max_workers,
        max_listing_pages=max_listing_pages,
    )
    return crawler.crawl(start_url)
