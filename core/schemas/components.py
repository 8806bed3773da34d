import re
from pathlib import Path
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ComponentMappings(BaseModel):
    """Snapshot of the two component lists declared in the mapping file."""

    model_config = ConfigDict(frozen=True)

    custom: Tuple[str, ...] = ()
    ootb: Tuple[str, ...] = ()


class BaseComponent(BaseModel):
    """A base form component a new custom component can extend."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    filename: str

    @classmethod
    def from_name(cls, name: str) -> "BaseComponent":
        slug = re.sub(r"\s+", "-", name.lower())
        return cls(name=name, value=slug, filename=f"_{slug}.json")


class ScaffoldResult(BaseModel):
    component_name: str
    base_component: BaseComponent
    target_dir: Path
    files: List[str] = Field(default_factory=list)
    used_fallback_template: bool = False
    mappings_updated: bool = False


class CommandResult(BaseModel):
    command: str
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0
