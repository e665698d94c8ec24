"""
Storm Events Analysis - Centralized Path Configuration
======================================================

This module provides centralized path management for the storm events project.
Import this at the top of every script to ensure consistent, relative paths.

Usage:
    from config_paths import STORM_DATA_FILE, STORM_CACHE_FILE, FIGURES_DIR

    df = pd.read_csv(STORM_DATA_FILE, usecols=RAW_COLUMNS)
    agg.to_csv(TABLES_DIR / 'category_aggregates.csv')
    fig.write_html(FIGURES_DIR / 'health_impact.html')
"""

from pathlib import Path
import sys

# ==============================================================================
# PROJECT ROOT DETECTION
# ==============================================================================

_ROOT_INDICATORS = ['pyproject.toml', 'README.md', 'requirements.txt', '.git']


def find_project_root():
    """
    Find project root by looking for key indicators.
    Searches upward from current file location.
    """
    current = Path(__file__).resolve().parent

    for indicator in _ROOT_INDICATORS:
        if (current / indicator).exists():
            return current

    # Search up to 3 parent levels
    for parent in current.parents[:3]:
        for indicator in _ROOT_INDICATORS:
            if (parent / indicator).exists():
                return parent

    # Fallback: parent of code/
    return current.parent

PROJECT_ROOT = find_project_root()

# ==============================================================================
# DIRECTORY PATHS
# ==============================================================================

CONFIG_DIR = PROJECT_ROOT / 'config'

CODE_DIR = PROJECT_ROOT / 'code'
FETCH_DIR = CODE_DIR / 'fetch'
CLEAN_DIR = CODE_DIR / 'clean'
ANALYZE_DIR = CODE_DIR / 'analyze'
REPORT_DIR = CODE_DIR / 'report'

DATA_DIR = PROJECT_ROOT / 'data'
RAW_DATA_DIR = DATA_DIR / 'raw'
PROCESSED_DATA_DIR = DATA_DIR / 'processed'

RESULTS_DIR = PROJECT_ROOT / 'results'
FIGURES_DIR = RESULTS_DIR / 'figures'
TABLES_DIR = RESULTS_DIR / 'tables'
REPORTS_DIR = RESULTS_DIR / 'reports'

LOGS_DIR = PROJECT_ROOT / 'logs'

# ==============================================================================
# DATA FILES
# ==============================================================================

# NOAA Storm Data (bz2-compressed CSV, ~47 MB)
STORM_DATA_FILE = RAW_DATA_DIR / 'StormData.csv.bz2'

# Enriched snapshot, trusted as-is when present
STORM_CACHE_FILE = PROCESSED_DATA_DIR / 'storm_events_enriched.pkl'

# ==============================================================================
# DIRECTORY CREATION
# ==============================================================================

def ensure_directories():
    """Create all necessary data/results directories if they don't exist."""
    directories = [
        CONFIG_DIR,
        RAW_DATA_DIR,
        PROCESSED_DATA_DIR,
        FIGURES_DIR,
        TABLES_DIR,
        REPORTS_DIR,
        LOGS_DIR,
    ]

    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)

# ==============================================================================
# UTF-8 ENCODING (Windows PowerShell fix)
# ==============================================================================

if sys.platform == 'win32':
    try:
        sys.stdout.reconfigure(encoding='utf-8')
        sys.stderr.reconfigure(encoding='utf-8')
    except AttributeError:
        pass

# Auto-create directories on import
ensure_directories()

# ==============================================================================
# VERIFICATION
# ==============================================================================

if __name__ == "__main__":
    """Run this script to verify path configuration."""
    from rich.console import Console
    from rich.table import Table

    console = Console()
    table = Table(title="Storm Events Path Configuration", show_header=True)
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Path", style="green")
    table.add_column("Exists?", style="yellow")

    paths = {
        'PROJECT_ROOT': PROJECT_ROOT,
        'CONFIG_DIR': CONFIG_DIR,
        'CODE_DIR': CODE_DIR,
        'FETCH_DIR': FETCH_DIR,
        'CLEAN_DIR': CLEAN_DIR,
        'ANALYZE_DIR': ANALYZE_DIR,
        'REPORT_DIR': REPORT_DIR,
        'RAW_DATA_DIR': RAW_DATA_DIR,
        'PROCESSED_DATA_DIR': PROCESSED_DATA_DIR,
        'FIGURES_DIR': FIGURES_DIR,
        'TABLES_DIR': TABLES_DIR,
        'REPORTS_DIR': REPORTS_DIR,
        'LOGS_DIR': LOGS_DIR,
        'STORM_DATA_FILE': STORM_DATA_FILE,
        'STORM_CACHE_FILE': STORM_CACHE_FILE,
    }

    for name, path in paths.items():
        exists = "✓" if path.exists() else "✗"
        table.add_row(name, str(path), exists)

    console.print(table)
    console.print("\n[bold green]All paths verified![/bold green]")
