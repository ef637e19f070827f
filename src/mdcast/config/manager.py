"""Configuration manager for loading mdcast build settings."""

from pathlib import Path
from typing import Any

import yaml

from mdcast.config.schema import BuildSettings
from mdcast.utils.errors import ConfigError, InvalidConfigError

CONFIG_FILENAME = "mdcast.yaml"


class ConfigManager:
    """Loads build settings from an optional ``mdcast.yaml`` file."""

    def __init__(self, root: Path | None = None, config_file: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            root: Project root holding the show descriptor. Defaults to cwd.
            config_file: Optional explicit config file. Defaults to
                ``<root>/mdcast.yaml``.
        """
        self.root = root if root is not None else Path.cwd()
        self.config_file = config_file if config_file is not None else self.root / CONFIG_FILENAME

    def load_settings(self, **overrides: Any) -> BuildSettings:
        """Load and validate build settings.

        Args:
            **overrides: Values that take precedence over the file (e.g.
                CLI flags). ``None`` values are ignored.

        Returns:
            Validated BuildSettings instance

        Raises:
            InvalidConfigError: If the config file is invalid
        """
        data: dict[str, Any] = {}

        if self.config_file.exists():
            try:
                with open(self.config_file) as f:
                    loaded = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise InvalidConfigError(
                    f"Invalid configuration in {self.config_file}: {e}"
                ) from e

            if not isinstance(loaded, dict):
                raise InvalidConfigError(
                    f"Invalid configuration in {self.config_file}: expected a mapping"
                )
            data.update(loaded)

        data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return BuildSettings(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_settings(self, settings: BuildSettings) -> None:
        """Write settings to the config file.

        Args:
            settings: BuildSettings instance to save

        Raises:
            ConfigError: If the file cannot be written
        """
        data = settings.model_dump(mode="python")

        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigError(f"failed to write {self.config_file}: {e}") from e
