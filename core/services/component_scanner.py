"""
Enumerates component folders under the form block and validates their names.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List

from core.exceptions import InvalidComponentNamesError

logger = logging.getLogger(__name__)

COMPONENT_DIR_NAME = re.compile(r"[a-zA-Z0-9_-]+")


def list_component_directories(dir_path: Path) -> List[str]:
    """
    Return the sorted names of the immediate subdirectories of dir_path.
    An unreadable or missing directory yields an empty list.
    """
    try:
        return sorted(entry.name for entry in Path(dir_path).iterdir() if entry.is_dir())
    except OSError as e:
        logger.debug(f"Cannot list components in {dir_path}: {e}")
        return []


def find_invalid_names(names: Iterable[str]) -> List[str]:
    return [name for name in names if not COMPONENT_DIR_NAME.fullmatch(name)]


def validate_component_names(names: Iterable[str], kind: str) -> None:
    """Raise InvalidComponentNamesError listing every name with illegal characters."""
    invalid = find_invalid_names(names)
    if invalid:
        raise InvalidComponentNamesError(kind, invalid)


def report_invalid_names(error: InvalidComponentNamesError) -> None:
    print("🚨 INVALID COMPONENT NAMES DETECTED!")
    print(f"❌ {error.kind} components contain illegal characters:")
    for name in error.names:
        print(f'   • "{name}" - contains spaces or invalid characters')
    print("\n💡 Component names must only contain:")
    print("   - Letters (a-z, A-Z)")
    print("   - Numbers (0-9)")
    print("   - Hyphens (-)")
    print("   - Underscores (_)")
    print("\n🔧 Please rename the component directories and try again.")
