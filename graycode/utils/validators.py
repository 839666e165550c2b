"""Parameter validation and run-config loading.

Provides centralized validation using pydantic:
    - Generation parameters (num_bits, radix)
    - Run config schema (gray.v1.yaml): output path, verification,
      logging settings

Validation fails fast with actionable messages naming the offending
field and the expected range.

Usage:
    from graycode.utils import validators

    params = validators.validate_params(4, 3)
    run_cfg = validators.load_run_config()            # packaged default
    run_cfg = validators.load_run_config("run.yaml")  # explicit path
"""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ConfigError, InvalidParametersError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "gray.v1.yaml"

# Parameters are 32-bit signed integers
MAX_INT = 2**31 - 1


# ============================================================================
# GENERATION PARAMETERS
# ============================================================================

class GrayCodeParams(BaseModel):
    """Digit count and radix of one generation run (immutable)."""
    model_config = ConfigDict(frozen=True)

    num_bits: int = Field(..., ge=1, le=MAX_INT, description="Number of digit positions")
    radix: int = Field(..., ge=1, le=MAX_INT, description="Number of values per digit (1 is degenerate)")

    @property
    def rows(self) -> int:
        """Number of code words, radix ** num_bits."""
        return self.radix ** self.num_bits


def _describe(e: ValidationError) -> str:
    """Flatten pydantic errors into 'field: message' pairs."""
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'value'}: {err['msg']}"
        for err in e.errors()
    )


def validate_params(num_bits: int, radix: int) -> GrayCodeParams:
    """Validate generation parameters.

    Parameters
    ----------
    num_bits : int
        Number of digit positions, >= 1
    radix : int
        Number of values per digit, >= 1

    Returns
    -------
    GrayCodeParams
        Validated, frozen parameters

    Raises
    ------
    InvalidParametersError
        If either value is out of range
    """
    try:
        return GrayCodeParams(num_bits=num_bits, radix=radix)
    except ValidationError as e:
        raise InvalidParametersError(f"Invalid parameters: {_describe(e)}") from e


# ============================================================================
# RUN CONFIG SCHEMA V1
# ============================================================================

class OutputConfig(BaseModel):
    """Where and how the code table is written."""
    path: str = Field("gray.txt", min_length=1, description="Output file path")
    verify: bool = Field(False, description="Check adjacency invariants before writing")


class RotateConfig(BaseModel):
    """Log file rotation."""
    mode: str = Field("size", description="'size' or 'time'")
    max_bytes: int = Field(10_000_000, ge=1024)
    backup_count: int = Field(3, ge=0, le=100)
    when: str = Field("D")
    interval: int = Field(1, ge=1)

    @field_validator('mode')
    @classmethod
    def validate_mode(cls, v: str) -> str:
        if v not in ("size", "time"):
            raise ValueError(f"mode must be 'size' or 'time', got '{v}'")
        return v


class LoggingConfig(BaseModel):
    """Logging settings passed to setup_logging()."""
    level: str = Field("WARNING", description="Root log level")
    file: Optional[str] = Field(None, description="Log file path; None disables file logging")
    json_format: bool = Field(False, alias="json", description="JSON lines in the log file")
    color: bool = Field(True, description="ANSI colors on a terminal")
    rotate: Optional[RotateConfig] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"level must be one of {sorted(allowed)}, got '{v}'")
        return v.upper()


class RunConfigV1(BaseModel):
    """Run configuration (gray.v1.yaml schema)."""
    schema_version: str = Field("gray.v1", alias="schema", description="Schema version")
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "gray.v1":
            raise ValueError(f"Expected schema 'gray.v1', got '{v}'")
        return v


def load_run_config(path: Union[str, Path, None] = None) -> RunConfigV1:
    """Load and validate a run config from YAML.

    Parameters
    ----------
    path : Union[str, Path, None]
        Path to a gray.v1 YAML file. None loads the default shipped
        with the package.

    Returns
    -------
    RunConfigV1
        Validated run configuration

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, empty or fails validation
    """
    from . import fs

    path = DEFAULT_CONFIG_PATH if path is None else Path(path)

    try:
        data = fs.load_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot load run config {path}: {e}") from e

    if data is None:
        raise ConfigError(f"Empty run config: {path}")
    if not isinstance(data, dict):
        raise ConfigError(f"Run config {path} must be a mapping, got {type(data).__name__}")

    try:
        return RunConfigV1(**data)
    except ValidationError as e:
        raise ConfigError(f"Run config validation failed at {path}: {_describe(e)}") from e
