import sys
from pathlib import Path

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
import requests


class FakeResponse:
    def __init__(self, url, text, status_code=200, headers=None):
        self.url = url
        self.text = text
        self.status_code = status_code
        self.headers = dict(headers or {})

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} for {self.url}", response=self)


class FakeSession:
    """Stand-in for requests.Session serving canned pages and recording every GET."""

    def __init__(self, pages=None, redirects=None):
        self.pages = dict(pages or {})
        self.redirects = dict(redirects or {})
        self.calls = []

    def get(self, url, timeout=None, allow_redirects=True):
        self.calls.append(url)
        if url in self.redirects:
            assert not allow_redirects, "redirects must be checked hop by hop"
            return FakeResponse(url, "", status_code=302, headers={"Location": self.redirects[url]})
        if url not in self.pages:
            return FakeResponse(url, "not found", status_code=404)
        return FakeResponse(url, self.pages[url])


@pytest.fixture
def fake_session():
    return FakeSession()


def listing_html(profile_hrefs, next_href=None):
    items = "".join(
        f'<div class="lister-item mode-detail">'
        f'<div class="lister-item-image"><a href="{href}"><img src="x.jpg"></a></div>'
        f"</div>"
        for href in profile_hrefs
    )
    nxt = f'<a class="lister-page-next next-page" href="{next_href}">Next »</a>' if next_href else ""
    return f"<html><body><div class='lister-list'>{items}</div>{nxt}</body></html>"


def name_html(name, movies=()):
    known_for = "".join(
        f'<div class="knownfor-title">'
        f'<div class="knownfor-title-role"><a class="knownfor-ellipsis">{title}</a></div>'
        f'<div class="knownfor-year"><span class="knownfor-ellipsis">{year}</span></div>'
        f"</div>"
        for title, year in movies
    )
    return f"""
    <html><body>
      <div id="content-2-wide">
        <h1 class="header"><span class="itemprop">{name}</span></h1>
        <div id="knownfor">{known_for}</div>
      </div>
    </body></html>
    """
