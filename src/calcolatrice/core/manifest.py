import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from calcolatrice.core.errors import ConfigError

DEFAULT_CONFIG_NAME = "calcolatrice.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DisplayConfig:
    """How results are rendered by the CLI."""

    precision: int | None = None  # significant digits; None means repr()


@dataclass
class ReplConfig:
    """Interactive loop settings."""

    prompt: str = "calc> "


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class CalcManifest:
    """
    Settings loaded from calcolatrice.toml.

    Example:
        [display]
        precision = 12

        [repl]
        prompt = "calc> "

        [logging]
        level = "DEBUG"
    """

    display: DisplayConfig = field(default_factory=DisplayConfig)
    repl: ReplConfig = field(default_factory=ReplConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source: Path | None = None

    @property
    def log_level(self) -> int:
        return int(getattr(logging, self.logging.level))


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _typed(section: dict[str, Any], key: str, kind: type, default: Any, where: str) -> Any:
    value = section.get(key, default)
    # bool is an int subclass; reject it where a number is expected
    if value is not None and (not isinstance(value, kind) or isinstance(value, bool)):
        raise ConfigError(f"{where}.{key} must be {kind.__name__}, got {type(value).__name__}")
    return value


def load_manifest(path: Path) -> CalcManifest:
    """Load settings from a TOML file.

    Raises:
        ConfigError: If the file is not valid TOML or holds bad values.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    display_data = _section(data, "display")
    repl_data = _section(data, "repl")
    logging_data = _section(data, "logging")

    precision = _typed(display_data, "precision", int, None, "display")
    if precision is not None and precision < 1:
        raise ConfigError(f"display.precision must be at least 1, got {precision}")

    level = _typed(logging_data, "level", str, "WARNING", "logging").upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")

    return CalcManifest(
        display=DisplayConfig(precision=precision),
        repl=ReplConfig(prompt=_typed(repl_data, "prompt", str, "calc> ", "repl")),
        logging=LoggingConfig(
            level=level,
            format=_typed(logging_data, "format", str, LoggingConfig.format, "logging"),
        ),
        source=path,
    )


def find_manifest(config: Path | None = None, cwd: Path | None = None) -> CalcManifest:
    """Load the explicit config file, else ./calcolatrice.toml, else defaults.

    An explicitly named file that does not exist is an error; a missing
    default file is not.
    """
    if config is not None:
        if not config.is_file():
            raise ConfigError(f"Config file not found: {config}")
        return load_manifest(config)

    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        return load_manifest(candidate)
    return CalcManifest()
