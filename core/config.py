from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Project layout
    PROJECT_ROOT: Path = Field(default_factory=Path.cwd)
    FORM_BLOCK_DIR: str = "blocks/form"
    CUSTOM_COMPONENTS_DIR: str = "custom-components"
    OOTB_COMPONENTS_DIR: str = "components"
    MAPPINGS_FILE: str = "mappings.js"
    FORM_MODELS_DIR: str = "models/form-components"

    # Runtime asset loading
    CODE_BASE_PATH: str = ""
    BEHAVIOR_MODULE_EXTENSION: str = "py"

    # Pre-commit commands
    LINT_COMMAND: str = "npm run lint"
    BUILD_JSON_COMMAND: str = "npm run build:json --silent"
    GENERATED_JSON_FILES: List[str] = [
        "component-models.json",
        "component-definition.json",
        "component-filters.json",
    ]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def form_block_path(self) -> Path:
        return self.PROJECT_ROOT / self.FORM_BLOCK_DIR

    @property
    def custom_components_path(self) -> Path:
        return self.form_block_path / self.CUSTOM_COMPONENTS_DIR

    @property
    def ootb_components_path(self) -> Path:
        return self.form_block_path / self.OOTB_COMPONENTS_DIR

    @property
    def mappings_path(self) -> Path:
        return self.form_block_path / self.MAPPINGS_FILE

    @property
    def form_models_path(self) -> Path:
        return self.form_block_path / self.FORM_MODELS_DIR

    @property
    def mappings_relpath(self) -> str:
        """Mapping file path as git reports it (POSIX, relative to the root)."""
        return f"{self.FORM_BLOCK_DIR}/{self.MAPPINGS_FILE}"


settings = Settings()


def get_settings(**overrides) -> Settings:
    """Return the module settings, or a fresh copy with the given overrides."""
    if not overrides:
        return settings
    return settings.model_copy(update=overrides)
