"""
Custom form component scaffolding.
Generates the behaviour, style and configuration files for a new component
and registers it in the mapping file.
"""

import copy
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from core.config import Settings, settings as default_settings
from core.exceptions import ComponentExistsError, ComponentNameError, MappingsFileError
from core.schemas.components import BaseComponent, ScaffoldResult
from core.services.mappings_file import MappingsFile

logger = logging.getLogger(__name__)

BASE_COMPONENT_NAMES = [
    "Button",
    "Checkbox",
    "Checkbox Group",
    "Date Input",
    "Drop Down",
    "Email",
    "File Input",
    "Image",
    "Number Input",
    "Panel",
    "Radio Group",
    "Reset Button",
    "Submit Button",
    "Telephone Input",
    "Text",
    "Text Input",
]

COMPONENT_NAME_PATTERN = re.compile(r"[a-z][a-z0-9-]*")
FORM_COMMON_PREFIX = re.compile(r"^\.\./form-common/")
CUSTOM_FORM_COMMON_PREFIX = "../../models/form-common/"
INCLUDE_KEY = "..."


def get_base_components() -> List[BaseComponent]:
    return [BaseComponent.from_name(name) for name in BASE_COMPONENT_NAMES]


def capitalize(name: str) -> str:
    """Uppercase the first character only ('icon-toggle' -> 'Icon-toggle')."""
    return name[:1].upper() + name[1:]


def validate_component_name(name: Optional[str], existing: Iterable[str] = ()) -> Optional[str]:
    """Return the reason name is unusable, or None if it is valid."""
    if not name or not isinstance(name, str):
        return "Component name is required"
    if name != name.lower():
        return "Component name must be lowercase"
    if not COMPONENT_NAME_PATTERN.fullmatch(name):
        return (
            "Component name must start with a letter and can only contain "
            "lowercase letters, numbers, and hyphens"
        )
    if name.startswith("-") or name.endswith("-"):
        return "Component name cannot start or end with a hyphen"
    if "_" in name:
        return "Component name cannot contain underscores"
    if name in existing:
        return f"Component '{name}' already exists. Please choose a different name."
    return None


def build_behavior_stub(name: str, base: BaseComponent) -> str:
    return f"""/**
 * Custom {name} component
 * Based on: {base.name}
 */
export default async function decorate(fieldDiv, fieldJson) {{
  console.log('⚙️ Decorating {name} component:', fieldDiv, fieldJson);

  // TODO: Implement your custom component logic here
  // You can access the field properties via fieldJson.properties

  return fieldDiv;
}}
"""


def build_style_stub(name: str) -> str:
    return f"""/* {capitalize(name)} component styles */

.{name} {{
  /* Add your custom styles here */
}}
"""


def transform_relative_paths(value: Any) -> Any:
    """Point '...' includes at the shared fragments as seen from custom-components/<name>/."""
    if isinstance(value, list):
        return [transform_relative_paths(item) for item in value]
    if isinstance(value, dict):
        transformed = {}
        for key, item in value.items():
            if key == INCLUDE_KEY and isinstance(item, str):
                transformed[key] = FORM_COMMON_PREFIX.sub(CUSTOM_FORM_COMMON_PREFIX, item, count=1)
            else:
                transformed[key] = transform_relative_paths(item)
        return transformed
    return value


def build_component_config(name: str, base_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Derive a custom component configuration from a base component's JSON.

    Raises KeyError/TypeError/AttributeError if the base does not have the
    expected definitions/models shape.
    """
    title = capitalize(name)
    config = copy.deepcopy(base_config)

    definitions = []
    for definition in config["definitions"]:
        template = definition["plugins"]["xwalk"]["page"].get("template") or {}
        definition["plugins"]["xwalk"]["page"]["template"] = {
            **template,
            "jcr:title": title,
            "fd:viewType": name,
        }
        definitions.append({**definition, "title": title, "id": name})
    config["definitions"] = definitions

    config["models"] = [transform_relative_paths({**model, "id": name}) for model in config["models"]]
    return config


def fallback_component_config(name: str) -> Dict[str, Any]:
    title = capitalize(name)
    return {
        "definitions": [
            {
                "title": title,
                "id": name,
                "plugins": {
                    "xwalk": {
                        "page": {
                            "resourceType": "core/fd/components/form/textinput/v1/textinput",
                            "template": {
                                "jcr:title": title,
                                "fieldType": "text-input",
                                "fd:viewType": name,
                            },
                        }
                    }
                },
            }
        ],
        "models": [
            {
                "id": name,
                "fields": [
                    {
                        "component": "container",
                        "name": "basic",
                        "label": "Basic",
                        "collapsible": False,
                        INCLUDE_KEY: f"{CUSTOM_FORM_COMMON_PREFIX}_basic-input-fields.json",
                    },
                    {INCLUDE_KEY: f"{CUSTOM_FORM_COMMON_PREFIX}_help-container.json"},
                ],
            }
        ],
    }


class ComponentScaffolder:
    """Creates custom components under blocks/form/custom-components/."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.mappings = MappingsFile(self.settings.mappings_path)

    def existing_components(self) -> List[str]:
        return self.mappings.read_custom_components()

    def validate_name(self, name: Optional[str]) -> Optional[str]:
        return validate_component_name(name, self.existing_components())

    def target_dir(self, name: str) -> Path:
        return self.settings.custom_components_path / name

    def load_component_config(self, name: str, base: BaseComponent) -> Tuple[Dict[str, Any], bool]:
        """Return (config, used_fallback)."""
        base_path = self.settings.form_models_path / base.filename
        try:
            base_config = json.loads(base_path.read_text(encoding="utf-8"))
            return build_component_config(name, base_config), False
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Base component {base.filename} unusable ({e}); using the basic template")
            print(f"⚠️ Could not read base component {base.filename}, creating basic JSON structure")
            return fallback_component_config(name), True

    def create_component_files(self, name: str, base: BaseComponent, target_dir: Path) -> Tuple[Dict[str, str], bool]:
        files = {
            "js": f"{name}.js",
            "css": f"{name}.css",
            "json": f"_{name}.json",
        }
        config, used_fallback = self.load_component_config(name, base)

        (target_dir / files["js"]).write_text(build_behavior_stub(name, base), encoding="utf-8")
        (target_dir / files["css"]).write_text(build_style_stub(name), encoding="utf-8")
        (target_dir / files["json"]).write_text(json.dumps(config, indent=2, ensure_ascii=False), encoding="utf-8")
        return files, used_fallback

    def update_mappings_file(self, name: str) -> bool:
        """Append name to customComponents; failures are warnings, not errors."""
        try:
            self.mappings.add_custom_component(name)
        except MappingsFileError as e:
            logger.warning(f"Could not update {self.settings.MAPPINGS_FILE}: {e}")
            print(f"⚠️ Could not update {self.settings.MAPPINGS_FILE}: {e}")
            return False
        print(f"✅ Updated {self.settings.MAPPINGS_FILE} to include '{name}' in customComponents array")
        return True

    def scaffold(self, name: str, base: BaseComponent) -> ScaffoldResult:
        """
        Create the component directory, its three files and the mapping entry.

        Raises ComponentNameError for an invalid or taken name and
        ComponentExistsError if the directory is already there; in both cases
        nothing is written.
        """
        reason = self.validate_name(name)
        if reason:
            raise ComponentNameError(reason)

        target_dir = self.target_dir(name)
        if target_dir.exists():
            raise ComponentExistsError(f"Component '{name}' already exists!")

        target_dir.mkdir(parents=True)
        files, used_fallback = self.create_component_files(name, base, target_dir)
        logger.info(f"Scaffolded {name} from {base.name} in {target_dir}")

        updated = self.update_mappings_file(name)
        return ScaffoldResult(
            component_name=name,
            base_component=base,
            target_dir=target_dir,
            files=[files["js"], files["css"], files["json"]],
            used_fallback_template=used_fallback,
            mappings_updated=updated,
        )
