from typing import Iterable, Optional, Tuple

from core.config import Settings, settings as default_settings
from core.schemas.components import ComponentMappings
from core.schemas.enums import ComponentCategory
from core.services.mappings_file import MappingsFile


class ComponentRegistry:
    """
    Immutable lookup of custom and OOTB component names.
    Build it once at startup; call reload() to get a fresh instance.
    """

    def __init__(self, mappings: ComponentMappings, source: Optional[MappingsFile] = None):
        self._mappings = mappings
        self._source = source

    @classmethod
    def from_names(cls, custom: Iterable[str] = (), ootb: Iterable[str] = ()) -> "ComponentRegistry":
        return cls(ComponentMappings(custom=tuple(custom), ootb=tuple(ootb)))

    @classmethod
    def from_mappings_file(cls, settings: Optional[Settings] = None) -> "ComponentRegistry":
        settings = settings or default_settings
        source = MappingsFile(settings.mappings_path)
        return cls(source.read_mappings(), source=source)

    @property
    def custom_components(self) -> Tuple[str, ...]:
        return self._mappings.custom

    @property
    def ootb_components(self) -> Tuple[str, ...]:
        return self._mappings.ootb

    def category_of(self, name: str) -> Optional[ComponentCategory]:
        """Custom components shadow OOTB ones with the same name."""
        if name in self._mappings.custom:
            return ComponentCategory.CUSTOM
        if name in self._mappings.ootb:
            return ComponentCategory.OOTB
        return None

    def with_custom_components(self, custom: Iterable[str]) -> "ComponentRegistry":
        return ComponentRegistry(
            self._mappings.model_copy(update={"custom": tuple(custom)}),
            source=self._source,
        )

    def reload(self) -> "ComponentRegistry":
        if self._source is None:
            raise ValueError("Registry was not built from a mappings file")
        return ComponentRegistry(self._source.read_mappings(), source=self._source)
