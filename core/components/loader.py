"""
Resolves which component a form field needs and loads it once per element.

Each element moves through NOT_LOADED -> LOADING -> LOADED (or FAILED).
The state lives in a weak side-table, and the LOADING transition happens
before the first await, so overlapping calls for one element load once.
FAILED is terminal: a broken component is logged and never retried.
"""

import inspect
import logging
import weakref
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from core.components.assets import AssetLoader
from core.components.registry import ComponentRegistry
from core.config import Settings, settings as default_settings
from core.schemas.enums import LoadStatus

logger = logging.getLogger(__name__)

FILE_INPUT_FIELD_TYPE = "file-input"
FILE_COMPONENT = "file"
WIZARD_COMPONENT = "wizard"


@dataclass(eq=False)
class FieldElement:
    """A rendered form field wrapper the decorator attaches behaviour to."""

    block_name: str = ""
    attributes: Dict[str, Any] = field(default_factory=dict)


class LoadStateTracker:
    def __init__(self):
        self._states: "weakref.WeakKeyDictionary[Any, LoadStatus]" = weakref.WeakKeyDictionary()

    def get(self, element) -> LoadStatus:
        return self._states.get(element, LoadStatus.NOT_LOADED)

    def set(self, element, status: LoadStatus) -> None:
        self._states[element] = status


class ComponentLoader:
    """Loads components from one folder under the form block."""

    def __init__(self, folder: str, assets: AssetLoader, tracker: LoadStateTracker):
        self.folder = folder
        self.assets = assets
        self.tracker = tracker

    async def load(self, component_name: str, element, fd: Mapping[str, Any], container=None, form_id: Optional[str] = None):
        if self.tracker.get(element) is not LoadStatus.NOT_LOADED:
            return element
        self.tracker.set(element, LoadStatus.LOADING)
        block_name = getattr(element, "block_name", "") or component_name

        status = LoadStatus.LOADED
        try:
            self.assets.load_css(self.assets.style_href(self.folder, component_name))
            module = await self.assets.import_module(self.assets.module_href(self.folder, component_name))
            decorate = getattr(module, "decorate", None)
            if decorate is not None:
                result = decorate(element, fd, container, form_id)
                if inspect.isawaitable(result):
                    await result
        except Exception as e:
            logger.warning(f"failed to load component for {block_name}: {e}", exc_info=True)
            status = LoadStatus.FAILED

        self.tracker.set(element, status)
        return element


class ComponentDecorator:
    """
    Decorates a field element with the component its definition asks for.

    File inputs always get the OOTB 'file' component, wizard types the OOTB
    'wizard' component; otherwise the ':type' is looked up in the custom
    list first, then the OOTB list.
    """

    def __init__(
        self,
        registry: ComponentRegistry,
        assets: Optional[AssetLoader] = None,
        tracker: Optional[LoadStateTracker] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or default_settings
        self.registry = registry
        self.assets = assets or AssetLoader(settings)
        self.tracker = tracker or LoadStateTracker()
        self.ootb_loader = ComponentLoader(settings.OOTB_COMPONENTS_DIR, self.assets, self.tracker)
        self.custom_loader = ComponentLoader(settings.CUSTOM_COMPONENTS_DIR, self.assets, self.tracker)

    def status(self, element) -> LoadStatus:
        return self.tracker.get(element)

    async def __call__(self, element, fd: Mapping[str, Any], container=None, form_id: Optional[str] = None):
        component_type = fd.get(":type") or ""
        field_type = fd.get("fieldType")

        if field_type == FILE_INPUT_FIELD_TYPE:
            await self.ootb_loader.load(FILE_COMPONENT, element, fd, container, form_id)

        if component_type.endswith(WIZARD_COMPONENT):
            await self.ootb_loader.load(WIZARD_COMPONENT, element, fd, container, form_id)

        if component_type in self.registry.custom_components:
            await self.custom_loader.load(component_type, element, fd, container, form_id)
        elif component_type in self.registry.ootb_components:
            await self.ootb_loader.load(component_type, element, fd, container, form_id)

        return None
