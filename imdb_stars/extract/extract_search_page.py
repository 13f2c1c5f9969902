from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urljoin

from ..models import LISTING, PROFILE, CrawlTarget
from .query import make_soup, query_all, query_attr

# Each search result is a .mode-detail item; the profile link sits on its image
RESULT_ITEM_SELECTOR = ".mode-detail"
PROFILE_LINK_SELECTOR = "div.lister-item-image > a"
NEXT_LINK_SELECTOR = "a.lister-page-next"


@dataclass
class SearchPageLinks:
    profile_urls: List[str] = field(default_factory=list)
    next_url: Optional[str] = None


def extract_search_page(html: str, page_url: str) -> SearchPageLinks:
    """
    Pull profile links and the "Next" link out of one search listing page.

    hrefs are resolved against `page_url`, so both "/name/nm0000123/" and
    "?page=2" style links come back absolute. next_url is None on the last page.
    """
    soup = make_soup(html)
    links = SearchPageLinks()

    for item in query_all(soup, RESULT_ITEM_SELECTOR):
        href = query_attr(item, PROFILE_LINK_SELECTOR, "href").strip()
        if not href:
            continue
        links.profile_urls.append(urljoin(page_url, href))

    next_href = query_attr(soup, NEXT_LINK_SELECTOR, "href").strip()
    if next_href:
        links.next_url = urljoin(page_url, next_href)

    return links


def targets_from_links(links: SearchPageLinks) -> List[CrawlTarget]:
    targets = [CrawlTarget(url=u, role=PROFILE) for u in links.profile_urls]
    if links.next_url:
        targets.append(CrawlTarget(url=links.next_url, role=LISTING))
    return targets
