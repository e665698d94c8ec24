"""
Fetch the NOAA Storm Database extract (1950 - Nov 2011).
Downloads to data/raw/StormData.csv.bz2.
"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from config_paths import STORM_DATA_FILE
from fetch._fetch_utils import download_file, get_url_for_tag, logger

# Used when config/dataset_sources.txt has no matching line
STORM_DATA_URL = "https://d396qusza40orc.cloudfront.net/repdata%2Fdata%2FStormData.csv.bz2"


def resolve_storm_data_url() -> str:
    """Return the configured storm data URL, or the built-in default."""
    url = get_url_for_tag("noaa_storm_events")
    if url is None:
        logger.info("Using default storm data URL")
        return STORM_DATA_URL
    return url


def main(force: bool = False, dest_path: Path | None = None) -> Path | None:
    dest_path = dest_path or STORM_DATA_FILE
    return download_file(resolve_storm_data_url(), dest_path, force=force)


def cli(argv: list[str] | None = None) -> int:
    """Command-line entry point; exit status 1 when the download fails."""
    ap = argparse.ArgumentParser(description="Download the NOAA storm events archive")
    ap.add_argument("--force", action="store_true", help="Re-download even if cached")
    args = ap.parse_args(argv)

    return 0 if main(force=args.force) else 1


if __name__ == "__main__":
    sys.exit(cli())
