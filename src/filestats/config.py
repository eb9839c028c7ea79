"""Configuration loading and management for filestats.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Global config (~/.filestats.toml)
    3. Project config (./filestats.toml)
    4. Explicit config file
    5. Environment variables (FILESTATS_* prefix)
    6. CLI overrides (passed as kwargs)

Include and exclude filters are one setting: whichever a higher source
names wins over the other from below.

Example:
    >>> config = load_config(workers=4, recursive=True)
    >>> config.workers
    4
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["plain", "rich", "json", "xml"]

OUTPUT_FORMATS = ("plain", "rich", "json", "xml")
VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


def normalize_extensions(values) -> list[str]:
    """Turn user-supplied extensions into extension tags.

    Accepts either a comma-separated string or an iterable of strings.
    ``".java"``, ``"java"`` and ``"JAVA"`` all become ``"JAVA"``.
    """
    if values is None:
        return []
    if isinstance(values, str):
        values = values.split(",")
    tags = []
    for value in values:
        tag = value.strip().lstrip(".").upper()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for one statistics run.

    Attributes:
        Execution:
            workers: Number of worker threads scanning files in parallel

        Path enumeration:
            recursive: Descend into subdirectories
            max_depth: Maximum depth when recursive (None = unlimited)
            include_extensions: Only keep files with these extension tags
            exclude_extensions: Drop files with these extension tags
            follow_symlinks: Descend into symlinked directories

        Output control:
            output_format: plain, rich, json or xml
            verbosity: Logging verbosity level
    """

    workers: int = 1

    recursive: bool = False
    max_depth: Optional[int] = None
    include_extensions: list[str] = field(default_factory=list)
    exclude_extensions: list[str] = field(default_factory=list)
    follow_symlinks: bool = False

    output_format: OutputFormat = "plain"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.max_depth is not None and self.max_depth < 1:
            raise InvalidConfigError("max_depth", self.max_depth, "must be at least 1")

        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "include_extensions", normalize_extensions(self.include_extensions))
        object.__setattr__(self, "exclude_extensions", normalize_extensions(self.exclude_extensions))
        if self.include_extensions and self.exclude_extensions:
            raise InvalidConfigError(
                "include_extensions",
                ",".join(self.include_extensions),
                "include and exclude extensions are mutually exclusive, pick one",
            )

        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"must be one of: {', '.join(OUTPUT_FORMATS)}"
            )
        if self.verbosity not in VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of: {', '.join(VERBOSITY_LEVELS)}"
            )

    @property
    def effective_max_depth(self) -> Optional[int]:
        """Depth limit actually applied by discovery (1 when not recursive)."""
        if not self.recursive:
            return 1
        return self.max_depth


def load_config(config_file: Optional[Path] = None, **overrides) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".filestats.toml"
    if global_config.exists():
        _apply_layer(merged, _load_toml_section(global_config))

    project_config = Path.cwd() / "filestats.toml"
    if project_config.exists():
        _apply_layer(merged, _load_toml_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _apply_layer(merged, _load_toml_section(config_file))

    _apply_layer(merged, _load_env_vars())

    # verbose/quiet flags collapse into a single verbosity value
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    _apply_layer(merged, {k: v for k, v in overrides.items() if v is not None})

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


# A layer that picks one filter mode replaces the other from lower layers
_FILTER_MODES = {
    "include_extensions": "exclude_extensions",
    "exclude_extensions": "include_extensions",
}


def _apply_layer(merged: dict, layer: dict) -> None:
    """Merge one configuration source over the lower-priority ones.

    Keys are replaced one by one, except the extension filters: a source that
    sets ``include_extensions`` drops an inherited ``exclude_extensions`` and
    vice versa. Setting both within the same source is still rejected by
    ScanConfig validation.
    """
    for key, other in _FILTER_MODES.items():
        if key in layer and other not in layer:
            merged.pop(other, None)
    merged.update(layer)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from FILESTATS_* environment variables.

    Supported environment variables:
        FILESTATS_WORKERS: int
        FILESTATS_RECURSIVE: bool (true/false/1/0)
        FILESTATS_MAX_DEPTH: int
        FILESTATS_INCLUDE_EXTENSIONS: comma-separated tags
        FILESTATS_EXCLUDE_EXTENSIONS: comma-separated tags
        FILESTATS_FOLLOW_SYMLINKS: bool
        FILESTATS_OUTPUT_FORMAT: plain/rich/json/xml
        FILESTATS_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any FILESTATS_* vars found.
    """
    type_hints = get_type_hints(ScanConfig)

    result: dict[str, Any] = {}

    for field_name in ScanConfig.__dataclass_fields__:
        env_key = f"FILESTATS_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        return normalize_extensions(value)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_section(path: Path) -> dict:
    """Load a TOML file, accepting either top-level keys or a [filestats] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("filestats", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file '{path}': [filestats] must be a table")
    return dict(section)
