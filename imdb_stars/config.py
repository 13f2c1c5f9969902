"""
Configuration for the IMDb birthday crawler.

Paths are relative to the working directory, matching where the crawler is
usually run from. Operational knobs are env-driven so a run can be tuned
without touching code.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Tuple

# Both hosts IMDb serves name and search pages from. Anything else is never fetched.
ALLOWED_DOMAINS: Tuple[str, ...] = ("www.imdb.com", "imdb.com")

SEARCH_URL_TEMPLATE = "https://www.imdb.com/search/name/?birth_monthday={month}-{day}"

CACHE_DIR = Path(os.getenv("IMDB_CACHE_DIR", "./.imdb_cache"))
OUTPUT_DIR = Path(os.getenv("IMDB_OUTPUT_DIR", "./outputs"))

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "20"))

USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120 Safari/537.36",
)

# Profile pages fetched in parallel per listing page, 1 for sequential
MAX_WORKERS = int(os.getenv("CRAWL_MAX_WORKERS", "1"))

# Control how many listing pages to walk for testing, -1 for all
MAX_LISTING_PAGES = int(os.getenv("MAX_LISTING_PAGES", "-1"))

# Optional S3 mirror of the output JSON; left unset, nothing is uploaded
RAW_BUCKET = os.getenv("RAW_BUCKET", "")
S3_BASE_PREFIX = "imdb/birthdays"
