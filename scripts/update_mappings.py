"""
Sync blocks/form/mappings.js with the component folders.

Usage:
    forms-update-mappings
    python -m scripts.update_mappings --root path/to/project
"""

import argparse
from pathlib import Path

from core.config import get_settings
from core.logging_config import setup_logging
from core.services.mapping_sync import sync_mappings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Update component mappings from the component folders")
    parser.add_argument("--root", type=Path, default=None, help="Project root (defaults to PROJECT_ROOT)")
    args = parser.parse_args(argv)

    setup_logging()
    settings = get_settings(PROJECT_ROOT=args.root.resolve()) if args.root else get_settings()
    return 0 if sync_mappings(settings) else 1


if __name__ == "__main__":
    raise SystemExit(main())
