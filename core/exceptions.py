"""
Error types shared by the forms tooling.
"""

from typing import Iterable, List, Optional


class FormsToolingError(Exception):
    """Base class for all tooling errors."""


class InvalidComponentNamesError(FormsToolingError):
    """One or more component directories have names outside [a-zA-Z0-9_-]."""

    def __init__(self, kind: str, names: Iterable[str]):
        self.kind = kind
        self.names: List[str] = list(names)
        super().__init__(f"{kind} components contain illegal characters: {', '.join(self.names)}")


class ComponentNameError(FormsToolingError):
    """A new component name breaks the naming rules."""


class ComponentExistsError(FormsToolingError):
    """The target component already exists."""


class MappingsFileError(FormsToolingError):
    """The mapping file could not be read or written."""


class MappingsPatternError(MappingsFileError):
    """An expected array declaration is missing from the mapping file."""


class CommandError(FormsToolingError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: str, returncode: int, stdout: str = "", stderr: Optional[str] = ""):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        super().__init__(f"Command '{command}' failed with exit code {returncode}")
