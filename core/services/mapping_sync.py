"""
Synchronizes the mapping file with the component folders on disk.
"""

import logging
from typing import Optional

from core.config import Settings, settings as default_settings
from core.exceptions import InvalidComponentNamesError, MappingsFileError
from core.services.component_scanner import (
    list_component_directories,
    report_invalid_names,
    validate_component_names,
)
from core.services.mappings_file import MappingsFile, format_array

logger = logging.getLogger(__name__)


def sync_mappings(settings: Optional[Settings] = None) -> bool:
    """
    Rewrite both arrays of mappings.js from the custom and OOTB component folders.

    Returns False (and leaves the file untouched) if a folder name is invalid
    or the file cannot be read, patched or written.
    """
    settings = settings or default_settings
    mappings = MappingsFile(settings.mappings_path)

    custom = list_component_directories(settings.custom_components_path)
    ootb = list_component_directories(settings.ootb_components_path)

    try:
        validate_component_names(custom, "Custom")
        validate_component_names(ootb, "OOTB")
    except InvalidComponentNamesError as e:
        logger.error(str(e))
        report_invalid_names(e)
        return False

    try:
        mappings.replace_components(custom, ootb)
    except MappingsFileError as e:
        logger.error(f"Error updating {settings.MAPPINGS_FILE}: {e}")
        print(f"❌ Error updating {settings.MAPPINGS_FILE}: {e}")
        return False

    logger.info(f"Mappings synced: {len(custom)} custom, {len(ootb)} OOTB")
    print(f"✅ Updated {settings.MAPPINGS_FILE}:")
    print(f"   Custom components ({len(custom)}): [{format_array(custom)}]")
    print(f"   OOTB components ({len(ootb)}): [{format_array(ootb)}]")
    return True
