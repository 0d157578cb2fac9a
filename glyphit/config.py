"""Configuration management for glyphit."""
import os
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import tomli
import tomli_w
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

from .catalog import EmojiCatalog

DEFAULT_CONFIG_FILENAME = ".glyphit.toml"
CONFIG_SECTION = "glyphit"

console = Console(stderr=True)


class Config(BaseModel):
    """Configuration settings for glyphit.

    Values come from the ``[glyphit]`` table of ``.glyphit.toml`` in the
    working tree root, then from ``GLYPHIT_*`` environment variables, then
    from command line options.
    """

    always_log: bool = Field(
        default=False,
        description="Whether to always write a timestamped log file"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    emoji_catalog: Optional[List[str]] = Field(
        default=None,
        description="Menu labels replacing the built-in emoji catalog"
    )

    catalog_file: Optional[str] = Field(
        default=None,
        description="TOML file with a 'labels' array replacing the built-in emoji catalog"
    )

    def __init__(self, **data):
        env_data = {}
        env_mapping = {
            "GLYPHIT_ALWAYS_LOG": "always_log",
            "GLYPHIT_LOG_FILE": "log_file",
            "GLYPHIT_CATALOG_FILE": "catalog_file",
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]
                if field_name == "always_log":
                    value = value.lower() in ["true", "1", "yes", "on"]
                else:
                    value = self._sanitize_string(value)
                env_data[field_name] = value

        super().__init__(**{**env_data, **data})

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Remove control characters and cap the length."""
        if not value:
            return value
        value = re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]", "", value)
        return value[:1000].strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Reject absolute paths and paths escaping the working tree."""
        if not path:
            return False
        if os.path.isabs(path) or path.startswith(("/", "\\")):
            return False
        return ".." not in Path(path).parts

    @classmethod
    def load(cls, repo_path: Path) -> "Config":
        """Load configuration from the config file.

        Args:
            repo_path: Working tree root of the repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = Path(repo_path) / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open("rb") as f:
                config_data = tomli.load(f)
            section = config_data.get(CONFIG_SECTION, {})
            if not isinstance(section, dict):
                raise ValueError(f"[{CONFIG_SECTION}] must be a table")
            for key in ("log_file", "catalog_file"):
                if isinstance(section.get(key), str):
                    section[key] = cls._sanitize_string(section[key])
            return cls(**section)
        except (OSError, ValueError) as e:
            console.print(f"[yellow]Warning: Error reading config file: {escape(str(e))}[/yellow]")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file."""
        config_path = Path(repo_path) / DEFAULT_CONFIG_FILENAME
        config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

        with config_path.open("wb") as f:
            tomli_w.dump({CONFIG_SECTION: config_dict}, f)

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set and safe.
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"glyphit-{timestamp}.log")
        if self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            console.print(
                f"[yellow]Warning: Unsafe log file path '{escape(self.log_file)}', logging disabled[/yellow]"
            )
        return None

    def catalog(self, base_dir: Optional[Path] = None) -> EmojiCatalog:
        """Build the emoji catalog, honouring configured overrides.

        An inline ``emoji_catalog`` wins over ``catalog_file``. Relative
        catalog files are resolved against ``base_dir``.
        """
        if self.emoji_catalog is not None:
            return EmojiCatalog(self.emoji_catalog)
        if self.catalog_file:
            path = Path(self.catalog_file)
            if base_dir is not None and not path.is_absolute():
                path = Path(base_dir) / path
            return EmojiCatalog.from_file(path)
        return EmojiCatalog()
