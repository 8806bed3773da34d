"""
Style and behaviour asset resolution for form components.
"""

import asyncio
import importlib.util
import logging
import re
import sys
from pathlib import Path
from types import ModuleType
from typing import List, Optional

from core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class AssetLoader:
    """
    Resolves component asset URLs and loads them.

    Stylesheets are recorded once per href, the way a document holds a single
    link element per stylesheet. Behaviour modules are imported from the
    project tree via importlib.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.stylesheets: List[str] = []
        self._modules: dict = {}

    def component_base(self, folder: str, component_name: str) -> str:
        return f"{self.settings.CODE_BASE_PATH}/{self.settings.FORM_BLOCK_DIR}/{folder}/{component_name}/{component_name}"

    def style_href(self, folder: str, component_name: str) -> str:
        return f"{self.component_base(folder, component_name)}.css"

    def module_href(self, folder: str, component_name: str) -> str:
        return f"{self.component_base(folder, component_name)}.{self.settings.BEHAVIOR_MODULE_EXTENSION}"

    def load_css(self, href: str) -> None:
        if href in self.stylesheets:
            return
        self.stylesheets.append(href)
        logger.debug(f"Stylesheet requested: {href}")

    def _module_path(self, href: str) -> Path:
        relative = href[len(self.settings.CODE_BASE_PATH):] if self.settings.CODE_BASE_PATH else href
        return self.settings.PROJECT_ROOT / relative.lstrip("/")

    async def import_module(self, href: str) -> ModuleType:
        """Load a behaviour module; the same href returns the cached module."""
        if href in self._modules:
            return self._modules[href]

        filepath = self._module_path(href)
        if not filepath.is_file():
            raise ImportError(f"Component module not found: {filepath}")

        module_name = re.sub(r"\W", "_", f"form_component_{filepath.parent.parent.name}_{filepath.stem}")
        spec = importlib.util.spec_from_file_location(module_name, filepath)
        module = importlib.util.module_from_spec(spec)
        # registered before exec_module so @dataclass can resolve the module
        sys.modules[module_name] = module
        try:
            await asyncio.to_thread(spec.loader.exec_module, module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise
        self._modules[href] = module
        return module
