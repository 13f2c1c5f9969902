"""
IMDb birthday stars crawler.

Responsible for:
- Walking the IMDb "born on" search listing for a given month/day, page by page.
- Visiting every linked name page and extracting a small biographical record.
- Writing the collected records to `outputs/<MM-DD>.json` (optionally mirrored to S3).
"""
