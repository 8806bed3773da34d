"""
Reads and patches the component arrays declared in the form block's mappings.js.

The browser bundle imports that file directly, so edits are textual: the
declarations must stay on one line each, in the shape

    let customComponents = ['a', 'b'];
    const OOTBComponentDecorators = ['c', 'd'];
"""

import logging
import re
from pathlib import Path
from typing import List, Sequence

from core.exceptions import MappingsFileError, MappingsPatternError
from core.schemas.components import ComponentMappings

logger = logging.getLogger(__name__)

CUSTOM_COMPONENTS_PATTERN = re.compile(r"let customComponents = \[([^\]]*)\];")
OOTB_COMPONENTS_PATTERN = re.compile(r"const OOTBComponentDecorators = \[([^\]]*)\];")


def format_array(names: Sequence[str]) -> str:
    """Render names as the body of a JS array literal: 'a', 'b'."""
    return ", ".join(f"'{name}'" for name in names)


def parse_array(body: str) -> List[str]:
    items = [item.strip().replace("'", "").replace('"', "") for item in body.split(",")]
    return [item for item in items if item]


class MappingsFile:
    """Text-level accessor for mappings.js."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MappingsFileError(f"Cannot read {self.path}: {e}") from e

    def write_text(self, content: str) -> None:
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise MappingsFileError(f"Cannot write {self.path}: {e}") from e

    @staticmethod
    def _match(pattern: re.Pattern, text: str, label: str) -> re.Match:
        match = pattern.search(text)
        if not match:
            raise MappingsPatternError(f"Could not find {label} array in mappings file")
        return match

    def read_mappings(self) -> ComponentMappings:
        text = self.read_text()
        custom = self._match(CUSTOM_COMPONENTS_PATTERN, text, "customComponents")
        ootb = self._match(OOTB_COMPONENTS_PATTERN, text, "OOTBComponentDecorators")
        return ComponentMappings(custom=tuple(parse_array(custom.group(1))), ootb=tuple(parse_array(ootb.group(1))))

    def read_custom_components(self) -> List[str]:
        """Current custom component names, or [] if the file or array is missing."""
        try:
            text = self.read_text()
        except MappingsFileError:
            return []
        match = CUSTOM_COMPONENTS_PATTERN.search(text)
        if not match:
            return []
        return parse_array(match.group(1))

    @classmethod
    def render(cls, text: str, custom: Sequence[str], ootb: Sequence[str]) -> str:
        """Return text with both arrays replaced; fails if either declaration is absent."""
        cls._match(CUSTOM_COMPONENTS_PATTERN, text, "customComponents")
        cls._match(OOTB_COMPONENTS_PATTERN, text, "OOTBComponentDecorators")
        custom_line = f"let customComponents = [{format_array(custom)}];"
        ootb_line = f"const OOTBComponentDecorators = [{format_array(ootb)}];"
        text = CUSTOM_COMPONENTS_PATTERN.sub(lambda _: custom_line, text, count=1)
        return OOTB_COMPONENTS_PATTERN.sub(lambda _: ootb_line, text, count=1)

    def replace_components(self, custom: Sequence[str], ootb: Sequence[str]) -> None:
        self.write_text(self.render(self.read_text(), custom, ootb))

    def add_custom_component(self, name: str) -> List[str]:
        """Append name to the customComponents array; returns the new list."""
        text = self.read_text()
        match = self._match(CUSTOM_COMPONENTS_PATTERN, text, "customComponents")
        components = parse_array(match.group(1))
        components.append(name)
        new_line = f"let customComponents = [{format_array(components)}];"
        self.write_text(CUSTOM_COMPONENTS_PATTERN.sub(lambda _: new_line, text, count=1))
        return components
