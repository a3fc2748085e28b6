"""Site configuration loading and validation."""

import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import ENV_NESTED_DELIMITER, ENV_PREFIX
from .enums import I18nStructure
from .errors import ConfigException
from .schema import FieldDefinition

logger = logging.getLogger(__name__)


class I18nSettings(BaseModel):
    """Internationalization settings, site wide or per collection."""

    structure: I18nStructure = I18nStructure.SINGLE_FILE
    locales: List[str] = Field(default_factory=list)
    default_locale: Optional[str] = None


class CollectionFilter(BaseModel):
    """Only entries whose ``field`` equals ``value`` belong to the collection."""

    field: str
    value: Any = None


class FileDefinition(BaseModel):
    """A single named file of a file collection."""

    model_config = ConfigDict(extra="allow")

    name: str
    label: Optional[str] = None
    file: Optional[str] = None
    fields: List[FieldDefinition] = Field(default_factory=list)


class Collection(BaseModel):
    """A named group of entries sharing one schema (or several, for files)."""

    model_config = ConfigDict(extra="allow")

    name: str
    label: Optional[str] = None
    folder: Optional[str] = None
    media_folder: Optional[str] = None
    public_folder: Optional[str] = None
    i18n: bool | I18nSettings | None = None
    filter: Optional[CollectionFilter] = None
    fields: Optional[List[FieldDefinition]] = None
    files: Optional[List[FileDefinition]] = None

    @model_validator(mode="after")
    def validate_fields_or_files(self) -> "Collection":
        if self.fields is not None and self.files is not None:
            raise ValueError(
                f"Collection '{self.name}' declares both fields and files"
            )
        return self

    @property
    def is_file_collection(self) -> bool:
        return self.files is not None

    def get_file_definition(self, name: str) -> FileDefinition | None:
        return next((f for f in self.files or [] if f.name == name), None)


class SiteConfig(BaseSettings):
    """Site configuration as seen by the content layer."""

    site_url: str = ""
    media_folder: str = ""
    public_folder: Optional[str] = None
    i18n: Optional[I18nSettings] = None
    collections: List[Collection] = Field(default_factory=list)
    asset_scan_concurrency: int = Field(default=0, ge=0)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_NESTED_DELIMITER,
    )

    @field_validator("i18n", mode="wrap")
    @classmethod
    def ignore_malformed_i18n(cls, v, handler):
        try:
            return handler(v)
        except ValidationError as e:
            logger.warning(
                f"Ignoring malformed site i18n settings {v!r}: "
                f"{e.error_count()} error(s)"
            )
            return None

    @model_validator(mode="after")
    def warn_duplicate_collections(self) -> "SiteConfig":
        seen = set()
        for collection in self.collections:
            if collection.name in seen:
                logger.warning(
                    f"Duplicate collection name '{collection.name}', "
                    "only the first definition is used"
                )
            seen.add(collection.name)
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "SiteConfig":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _SiteConfig(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix=ENV_PREFIX,
                env_nested_delimiter=ENV_NESTED_DELIMITER,
            )

        try:
            return _SiteConfig()
        except ValidationError as e:
            raise ConfigException(_format_validation_error(e)) from e
        except ValueError as e:
            # tomllib.TOMLDecodeError
            raise ConfigException(f"Invalid configuration file {config_path}: {e}") from e

    @classmethod
    def from_dict(cls, data: dict) -> "SiteConfig":
        """Build configuration from an already parsed mapping."""
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigException(_format_validation_error(e)) from e


def _format_validation_error(e: ValidationError) -> str:
    error_lines = ["Configuration validation failed:"]
    for error in e.errors():
        loc = " -> ".join(str(item) for item in error["loc"])
        error_lines.append(f"  - {loc}: {error['msg']}")
    return "\n".join(error_lines)
