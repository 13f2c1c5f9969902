from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

LISTING = "listing"
PROFILE = "profile"


@dataclass(frozen=True)
class Movie:
    """One "known for" credit on a name page."""
    title: str = ""
    release: str = ""   # usually a year, sometimes a status label

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "release": self.release}


@dataclass(frozen=True)
class Star:
    """
    One scraped name page.

    Every string field may be empty when the page did not carry it.
    top_movies keeps the order the credits appear in on the page.
    """
    name: str = ""
    photo_url: str = ""
    job_title: str = ""
    birth_date: str = ""
    bio: str = ""
    top_movies: Tuple[Movie, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "photo": self.photo_url,
            "job_title": self.job_title,
            "birthdate": self.birth_date,
            "bio": self.bio,
            "top_movies": [m.to_dict() for m in self.top_movies],
        }


@dataclass(frozen=True)
class CrawlTarget:
    url: str
    role: str  # LISTING or PROFILE
