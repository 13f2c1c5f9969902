import sys
from typing import List, Optional, Tuple

from . import config
from .crawl import crawl_birthday
from .publish import publish, serialize_stars

PROMPT = "Type a date and month in (MM-DD) format: "


def parse_date_token(token: str) -> Tuple[int, int]:
    """
    Split an "MM-DD" token into (month, day).

    Values are parsed as ints only; "1-5" and "12-23" are both fine and
    nothing is checked against the calendar.
    """
    parts = (token or "").strip().split("-")
    if len(parts) != 2:
        raise ValueError(f"expected MM-DD, got {token!r}")
    month_raw, day_raw = parts
    return _parse_int(month_raw, "month"), _parse_int(day_raw, "day")


def _parse_int(raw: str, label: str) -> int:
    # ASCII digits with an optional sign only; int() alone also takes "1_2" and non-ASCII digits
    digits = raw[1:] if raw[:1] in ("+", "-") else raw
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"unable to convert {label} {raw!r} into int")
    return int(raw)


def read_token(argv: List[str]) -> str:
    if argv:
        return argv[0].strip()
    print(PROMPT)
    return sys.stdin.readline().strip()


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    token = read_token(argv)
    try:
        month, day = parse_date_token(token)
    except ValueError as e:
        print(f"[ERROR] Unable to read date: {e}")
        return 1

    stars = crawl_birthday(month, day)

    try:
        payload = serialize_stars(stars)
    except (TypeError, ValueError) as e:
        print(f"[WARN] Error while serializing JSON: {e}")
        payload = "[]"

    publish(token, payload, count=len(stars), output_dir=config.OUTPUT_DIR, bucket=config.RAW_BUCKET or None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
