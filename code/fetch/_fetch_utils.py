"""
Shared utilities for the fetch stage.
Provides source-URL lookup and a cached download helper.
"""

from __future__ import annotations

import hashlib
import os
import sys
from pathlib import Path
from urllib.parse import unquote, urlparse
from urllib.request import urlretrieve

# Ensure code/ is on sys.path so sibling imports work
_CODE_DIR = Path(__file__).resolve().parent.parent
if str(_CODE_DIR) not in sys.path:
    sys.path.insert(0, str(_CODE_DIR))

from config_paths import CONFIG_DIR
from logging_config import setup_logger

logger = setup_logger("fetch.utils")

SOURCES_FILE = CONFIG_DIR / "dataset_sources.txt"

# ---------------------------------------------------------------------------
# URL registry: maps a keyword tag to a line-match pattern in dataset_sources.txt
# ---------------------------------------------------------------------------
SOURCE_TAGS = {
    "noaa_storm_events": "StormData.csv",
}


def read_sources_file(sources_file: Path | None = None) -> list[str]:
    """Read all non-empty, non-comment lines from dataset_sources.txt."""
    sources_file = sources_file or SOURCES_FILE
    if not sources_file.exists():
        logger.warning("dataset_sources.txt not found at %s", sources_file)
        return []
    urls: list[str] = []
    for line in sources_file.read_text(encoding="utf-8").splitlines():
        cleaned = line.strip()
        if cleaned and not cleaned.startswith("#"):
            urls.append(cleaned)
    return urls


def get_url_for_tag(tag: str, sources_file: Path | None = None) -> str | None:
    """
    Look up a URL from dataset_sources.txt by matching the tag pattern.
    Patterns are compared against the percent-decoded URL.
    Returns the first matching URL or None.
    """
    pattern = SOURCE_TAGS.get(tag)
    if not pattern:
        logger.warning("Unknown source tag: %s", tag)
        return None

    for url in read_sources_file(sources_file):
        if pattern in unquote(url):
            return url

    logger.warning("No URL matched tag '%s' (pattern: '%s')", tag, pattern)
    return None


def filename_from_url(url: str) -> str:
    """Extract a clean filename from a URL, stripping query params.

    Percent-encoded separators are decoded first, so
    ``.../repdata%2Fdata%2FStormData.csv.bz2`` gives ``StormData.csv.bz2``.
    """
    parsed = urlparse(url)
    name = os.path.basename(unquote(parsed.path))
    if name:
        return name
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:10]
    return f"download_{digest}.bin"


def download_file(url: str, dest_path: Path, force: bool = False) -> Path | None:
    """
    Download *url* to *dest_path*.
    Skips the download if the file already exists and *force* is False.
    Returns the local Path on success, None on failure.
    """
    dest_path.parent.mkdir(parents=True, exist_ok=True)

    if dest_path.exists() and not force:
        logger.info("Already cached: %s", dest_path.name)
        return dest_path

    logger.info("Downloading %s -> %s ...", url, dest_path.name)
    # Write to a partial file so an interrupted transfer never looks cached
    partial = dest_path.with_name(dest_path.name + ".part")
    try:
        urlretrieve(url, partial)
        partial.replace(dest_path)
        logger.info("Saved: %s (%d bytes)", dest_path.name, dest_path.stat().st_size)
        return dest_path
    except Exception as exc:
        logger.error("Failed to download %s: %s", url, exc, exc_info=True)
        partial.unlink(missing_ok=True)
        return None
