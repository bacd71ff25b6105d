"""Configuration management for purepath."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from purepath.config.file_ops import write_text_file
from purepath.config.paths import default_config_path
from purepath.platform.logging import logger
from purepath.shared.path_syntax import PathSyntax

SEPARATOR_STYLE_DEFAULT: Final[str] = "native"
SEPARATOR_STYLES: Final[tuple[str, ...]] = ("native", "posix", "windows")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Separator flavour used for every PurePath built by the CLI
    separator_style: str = SEPARATOR_STYLE_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate the separator style.

        Raises:
            ValueError: If ``separator_style`` is not a known style.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if self.separator_style not in SEPARATOR_STYLES:
            raise ValueError(
                f"Invalid separator_style '{self.separator_style}' "
                f"(expected one of {', '.join(SEPARATOR_STYLES)})"
            )

    def syntax(self) -> PathSyntax:
        """Return the path syntax selected by ``separator_style``."""

        return PathSyntax.from_style(self.separator_style)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target if target is not None else default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

        logger.info("Configuration saved to %s", destination)
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# purepath configuration file")
        lines.append("")

        lines.append("# Separator flavour for paths built by the CLI")
        lines.append('# One of "native", "posix", "windows" (default "native")')
        lines.append(
            f"separator_style = {self._format_toml_value(config['separator_style'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/purepath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> Config:
        """Load configuration from file.

        A missing file yields the defaults; nothing is written.

        Args:
            config_file: File to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            ValueError: If a value is invalid.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file if config_file is not None else default_config_path()

        if not source.exists():
            logger.debug("No configuration at %s, using defaults", source)
            instance = cls()
        else:
            try:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        source,
                        ", ".join(unknown),
                    )
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            except (tomllib.TOMLDecodeError, ValueError, TypeError) as e:
                logger.error("Failed to load configuration from %s: %s", source, e)
                raise
            logger.debug("Configuration loaded from %s", source)

        cls._instance = instance
        cls._loaded_from = source
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "SEPARATOR_STYLES", "SEPARATOR_STYLE_DEFAULT"]
