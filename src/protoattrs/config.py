from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Annotated, Any, Literal, Self

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from protoattrs.constants import DEFAULT_MANIFEST_NAME, PROJECT_CONFIG_NAME
from protoattrs.exceptions import ConfigError
from protoattrs.logging import get_logger

__all__ = [
    "ProtoAttrsConfig",
    "SerdeStep",
    "SerdeAsField",
    "SerdeAsStep",
    "TemplateStep",
    "BuilderOverrideStep",
    "RawAttributesStep",
    "OverlayStep",
    "load_config",
    "get_user_config_path",
]

logger = get_logger(__name__)

_project_config_path: ContextVar[Path | None] = ContextVar(
    "_project_config_path", default=None
)


class SerdeStep(BaseModel):
    """Serde derives on a list of types."""

    capability: Literal["serde"]
    names: list[str]
    serialize: bool = True
    deserialize: bool = True
    extra: list[str] | None = None


class SerdeAsField(BaseModel):
    """Fields of a message that share one ``serde_as`` adapter attribute."""

    fields: list[str]
    attribute: str


class SerdeAsStep(BaseModel):
    capability: Literal["serde_as"]
    message: str
    fields: list[SerdeAsField] = Field(default_factory=list)


class TemplateStep(BaseModel):
    """A fixed-template capability applied to a list of types.

    Attributes:
        capability: Which template to apply.
        names: Dot-qualified type names.
        extra: Attribute lines registered after the template, verbatim.
    """

    capability: Literal["derive_builder", "sqlx_type", "sqlx_from_row", "strum"]
    names: list[str]
    extra: list[str] | None = None


class BuilderOverrideStep(BaseModel):
    """Field-level builder setter overrides on one message."""

    capability: Literal["derive_builder_into", "derive_builder_option"]
    message: str
    fields: list[str]


class RawAttributesStep(BaseModel):
    """Caller-supplied attribute lines, no template.

    ``names`` are type names for ``type_attributes`` and full field paths for
    ``field_attributes``.
    """

    capability: Literal["type_attributes", "field_attributes"]
    names: list[str]
    attributes: list[str]


OverlayStep = Annotated[
    SerdeStep | SerdeAsStep | TemplateStep | BuilderOverrideStep | RawAttributesStep,
    Field(discriminator="capability"),
]


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source backed by a YAML mapping on disk."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file is None or not yaml_file.exists():
            return
        try:
            with open(yaml_file) as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_file}: {e}") from e
        if loaded is None:
            logger.warning("config_file_empty", path=str(yaml_file))
        elif not isinstance(loaded, dict):
            raise ConfigError(
                f"Config file {yaml_file} must contain a mapping",
                value=type(loaded).__name__,
            )
        else:
            self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._config_data


class ProtoAttrsConfig(BaseSettings):
    """Root configuration: what to compile and which overlay steps to replay.

    Attributes:
        sources: Schema files handed to the generator's compile step.
        include_paths: Import roots for the schema files.
        out_dir: Directory the attribute manifest is written to.
        manifest_name: Manifest file name inside ``out_dir``.
        known_entities: When set, compile rejects bindings on other selectors.
        verbosity: Default log level when no -v/-q flag is given.
        steps: Overlay steps applied in order.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOATTRS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    sources: list[Path] = Field(default_factory=list)
    include_paths: list[Path] = Field(default_factory=list)
    out_dir: Path = Path("generated")
    manifest_name: str = DEFAULT_MANIFEST_NAME
    known_entities: list[str] | None = None
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"
    steps: list[OverlayStep] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_manifest_name(self) -> Self:
        if not self.manifest_name or Path(self.manifest_name).name != self.manifest_name:
            raise ValueError("manifest_name must be a bare file name")
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
        """Sources from highest to lowest priority.

        1. Init arguments
        2. Environment variables (PROTOATTRS_*)
        3. Project YAML (./protoattrs.yaml or the --config path)
        4. User YAML (~/.config/protoattrs/config.yaml)
        """
        project_config_path = _project_config_path.get() or (
            Path.cwd() / PROJECT_CONFIG_NAME
        )
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path:
    """Return ~/.config/protoattrs/config.yaml."""
    return Path.home() / ".config" / "protoattrs" / "config.yaml"


def load_config(config_path: Path | None = None) -> ProtoAttrsConfig:
    """Load configuration with hierarchy: user -> project -> env.

    Args:
        config_path: Project config file. Defaults to ./protoattrs.yaml.

    Returns:
        Merged ProtoAttrsConfig.

    Raises:
        ConfigError: If the YAML is malformed, the file given explicitly does
            not exist, or validation fails.
    """
    if config_path is not None and not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}", value=str(config_path))
    if config_path is None and not (Path.cwd() / PROJECT_CONFIG_NAME).exists():
        logger.info("project_config_missing", using="defaults")

    token = _project_config_path.set(config_path)
    try:
        return ProtoAttrsConfig()
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
    finally:
        _project_config_path.reset(token)
