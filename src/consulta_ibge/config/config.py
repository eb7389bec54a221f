"""Configuration management for consulta-ibge."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from consulta_ibge.config.file_ops import write_text_file
from consulta_ibge.config.paths import default_config_path
from consulta_ibge.platform.logging import logger

DEFAULT_BASE_URL = "https://servicodados.ibge.gov.br/api/v1/localidades"
DEFAULT_APP_NAME = "consulta-ibge"
DEFAULT_APP_VERSION = "0.1.0"


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

    # Root of the "localidades" API; the estados/distritos segments are appended
    base_url: str = DEFAULT_BASE_URL

    # Log file path
    log_file: Path | None = _path_field()

    # User-Agent identity sent with every request
    app_name: str | None = None
    app_version: str | None = None
    contact: str | None = None

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# consulta-ibge Configuration File")
        lines.append("")

        lines.append("# Base URL of the IBGE localidades API")
        lines.append(f'# Example: base_url = "{DEFAULT_BASE_URL}"')
        lines.append(f"base_url = {self._format_toml_value(config['base_url'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/consulta_ibge.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# User-Agent identity (optional)")
        lines.append("# Sent as 'app_name/app_version (contact)' with every request")
        if config.get("app_name"):
            lines.append(f"app_name = {self._format_toml_value(config['app_name'])}")
        if config.get("app_version"):
            lines.append(f"app_version = {self._format_toml_value(config['app_version'])}")
        if config.get("contact"):
            lines.append(f"contact = {self._format_toml_value(config['contact'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults without touching the disk; use
        :meth:`save` to materialise it.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                config_dict = {k: v for k, v in config_dict.items() if k in known}

                _ = config_dict.setdefault("base_url", DEFAULT_BASE_URL)
                if not isinstance(config_dict["base_url"], str):
                    raise TypeError(
                        f"base_url in {config_file} must be a string, "
                        f"got {type(config_dict['base_url']).__name__}"
                    )
                if not config_dict["base_url"].strip():
                    config_dict["base_url"] = DEFAULT_BASE_URL

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                logger.debug("No configuration at %s; using defaults", config_file)
                instance = cls()

            cls._instance = instance
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = ["Config", "DEFAULT_APP_NAME", "DEFAULT_APP_VERSION", "DEFAULT_BASE_URL"]
