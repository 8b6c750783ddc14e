"""Configuration schema.

Settings are plain pydantic models. The library never reads files or the
environment; callers load the data themselves and hand it to
:func:`config_from_mapping` or :func:`config_from_toml`.
"""

from typing import Any, Literal, Mapping

import toml
from pydantic import BaseModel, Field, ConfigDict, ValidationError, ValidationInfo, field_validator

from .coerce import check_encoding
from .eol import eol_from_name
from .errors import ConfigurationError


class LoggingConfig(BaseModel):
    """Console logging for applications embedding the normalizer."""

    model_config = ConfigDict(extra='forbid')

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Level for the file_normalize logger"
    )
    format: Literal["simple", "detailed"] = Field(
        default="simple",
        description="Console line layout"
    )

    @field_validator('level', 'format', mode='before')
    @classmethod
    def fold_case(cls, v: Any, info: ValidationInfo) -> Any:
        """Accept level and format names in any case."""
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == 'level' else v.lower()


class NormalizerConfig(BaseModel):
    """Defaults for a Normalizer."""

    model_config = ConfigDict(extra='forbid')

    eol: Literal["lf", "crlf", "cr", "native"] = Field(
        default="native",
        description="Default line ending; 'native' uses the host platform's"
    )
    trailing_slash: bool = Field(
        default=True,
        description="Strip a trailing slash when normalizing paths"
    )
    encoding: str = Field(
        default="utf-8",
        description="ASCII-compatible encoding used when mixing text and bytes"
    )

    @field_validator('eol', mode='before')
    @classmethod
    def normalize_eol_name(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        return check_encoding(v)

    def resolve_eol(self) -> str:
        """Return the line-ending sequence this config names."""
        return eol_from_name(self.eol)


class NormalizeConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    normalizer: NormalizerConfig = Field(default_factory=NormalizerConfig)


def config_from_mapping(data: Mapping[str, Any]) -> NormalizeConfig:
    """Validate caller-supplied settings into a NormalizeConfig.

    Raises:
        ConfigurationError: If the settings fail validation
    """
    try:
        return NormalizeConfig.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", errors=e.errors()) from e


def config_from_toml(text: str) -> NormalizeConfig:
    """Parse TOML text the caller has already read and validate it.

    Raises:
        ConfigurationError: If the text is not valid TOML or fails validation
    """
    try:
        data = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise ConfigurationError(f"Cannot parse configuration: {e}") from e
    return config_from_mapping(data)
