#!/usr/bin/env python3
"""Run the full analysis: fetch -> clean -> analyze -> report."""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))
from logging_config import PIPELINE_STAGES, setup_logger

logger = setup_logger("pipeline.run")

CODE_DIR = Path(__file__).resolve().parent

STAGE_SCRIPTS = {
    "fetch": CODE_DIR / "fetch" / "fetch_noaa_storm_events.py",
    "clean": CODE_DIR / "clean" / "clean_storm_data.py",
    "analyze": CODE_DIR / "analyze" / "aggregate_by_category.py",
    "report": CODE_DIR / "report" / "build_report.py",
}


def pipeline_steps(force_download: bool = False, refresh: bool = False) -> list[list[str]]:
    """Return [script, *args] for each stage, in order."""
    stage_args = {
        "fetch": ["--force"] if force_download else [],
        "clean": ["--refresh"] if refresh else [],
    }
    return [[str(STAGE_SCRIPTS[stage])] + stage_args.get(stage, []) for stage in PIPELINE_STAGES]


def run_step(step: list[str]) -> None:
    script_path = Path(step[0])
    if not script_path.exists():
        raise FileNotFoundError(f"Missing script: {script_path}")
    logger.info("Running %s ...", script_path.name)
    result = subprocess.run([sys.executable, *step], check=False)
    if result.returncode != 0:
        logger.error("  FAILED: %s (exit %d)", script_path.name, result.returncode)
        raise SystemExit(result.returncode)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Run the storm events analysis pipeline")
    ap.add_argument("--force-download", action="store_true",
                    help="Re-download the raw archive even if it is present")
    ap.add_argument("--refresh", action="store_true",
                    help="Ignore the cached enriched snapshot")
    args = ap.parse_args(argv)

    logger.info("=" * 60)
    logger.info("STORM EVENTS PIPELINE")
    logger.info("=" * 60)

    for step in pipeline_steps(args.force_download, args.refresh):
        run_step(step)

    logger.info("Pipeline complete.")


if __name__ == "__main__":
    main()
