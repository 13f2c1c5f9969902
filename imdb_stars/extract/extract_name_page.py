from typing import List, Optional

from bs4.element import Tag

from ..models import Movie, Star
from .query import make_soup, query_all, query_attr, query_text

# Only pages carrying this container are name pages worth a record
PROFILE_MARKER = "#content-2-wide"

NAME_SELECTOR = "h1.header > span.itemprop"
PHOTO_SELECTOR = "#name-poster"
JOB_TITLE_SELECTOR = "#name-job-categories > a > span.itemprop"
BIRTH_DATE_SELECTOR = "#name-born-info > time"
BIO_SELECTOR = "#name-bio-text > div.name-trivia-bio-text > div.inline"

KNOWN_FOR_BLOCK_SELECTOR = "div.knownfor-title"
KNOWN_FOR_TITLE_SELECTOR = "div.knownfor-title-role > a.knownfor-ellipsis"
KNOWN_FOR_RELEASE_SELECTOR = "div.knownfor-year > span.knownfor-ellipsis"


def parse_known_for(profile: Tag) -> List[Movie]:
    """
    Parse the "Known For" strip. Blocks are kept in page order and are not
    filtered, so a block with neither title nor year still yields an empty Movie.
    """
    movies: List[Movie] = []
    for block in query_all(profile, KNOWN_FOR_BLOCK_SELECTOR):
        movies.append(
            Movie(
                title=query_text(block, KNOWN_FOR_TITLE_SELECTOR),
                release=query_text(block, KNOWN_FOR_RELEASE_SELECTOR),
            )
        )
    return movies


def extract_star(profile: Tag) -> Star:
    return Star(
        name=query_text(profile, NAME_SELECTOR),
        photo_url=query_attr(profile, PHOTO_SELECTOR, "src"),
        job_title=query_text(profile, JOB_TITLE_SELECTOR),
        birth_date=query_attr(profile, BIRTH_DATE_SELECTOR, "datetime"),
        bio=query_text(profile, BIO_SELECTOR),
        top_movies=tuple(parse_known_for(profile)),
    )


def parse_name_page_html(html: str) -> Optional[Star]:
    """
    Given the HTML for a single name page, extract a Star.

    Returns None when the page has no profile container (not a name page,
    or an error page), so no placeholder record is ever produced.
    """
    soup = make_soup(html)
    profile = soup.select_one(PROFILE_MARKER)
    if profile is None:
        return None
    return extract_star(profile)
