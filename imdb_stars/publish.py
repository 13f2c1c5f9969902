from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import boto3

from .config import OUTPUT_DIR, S3_BASE_PREFIX
from .models import Star


def _get_s3_client(region_name: str | None = None):
    return boto3.client("s3", region_name=region_name)


def serialize_stars(stars: List[Star]) -> str:
    """Tab-indented JSON array of star records; `[]` when the crawl found nobody."""
    return json.dumps([s.to_dict() for s in stars], indent="\t", ensure_ascii=False)


def output_path(token: str, output_dir: Path = OUTPUT_DIR) -> Path:
    return Path(output_dir) / f"{token}.json"


def write_local(path: Path, payload: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload, encoding="utf-8")
    return path


def s3_key_for(token: str) -> str:
    return f"{S3_BASE_PREFIX}/{token}.json"


def upload_s3(bucket: str, key: str, payload: str, client=None) -> str:
    s3 = client if client is not None else _get_s3_client()
    s3.put_object(
        Bucket=bucket,
        Key=key,
        Body=payload.encode("utf-8"),
        ContentType="application/json",
    )
    return key


def publish(token: str, payload: str, count: int = 0, output_dir: Path = OUTPUT_DIR, bucket: Optional[str] = None) -> Optional[Path]:
    """
    Write the JSON payload to `<output_dir>/<token>.json` and, when a bucket is
    configured, mirror it to S3. Failures are reported, not raised: the crawl
    result is lost but the process still exits cleanly.
    """
    path = output_path(token, output_dir)
    written: Optional[Path] = None
    try:
        written = write_local(path, payload)
        print(f"Wrote {count} stars to {path}")
    except OSError as e:
        print(f"[WARN] Failed to write {path}: {e}")

    if bucket:
        key = s3_key_for(token)
        try:
            upload_s3(bucket, key, payload)
            print(f"Uploaded JSON to s3://{bucket}/{key}")
        except Exception as e:
            print(f"[WARN] Failed to upload JSON to S3: {e}")

    return written
