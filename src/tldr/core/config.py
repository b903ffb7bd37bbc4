"""Configuration management for YAML-based config files."""

import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .paths import get_data_dir, get_system_path, resolve_data_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = get_data_dir() / "config"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.yaml"
_TEMPLATE_CONFIG = get_system_path("config", "config.yaml")

DEFAULT_PERCENT_TO_KEEP = 0.4

_DEFAULT_CONFIG_TEMPLATE = """# Auto-generated default configuration for tldr
retrieval:
  user_agent: "tldr/0.1 (extractive article summarizer)"
  rps: 1.0
  max_retries: 3
  timeout: 15

summarizer:
  percent_to_keep: 0.4
  stop_words_path: null
"""


def _write_template(path: Path, content: str) -> None:
    """Write templated YAML content to disk with a trailing newline."""
    path.write_text(content.strip() + "\n", encoding="utf-8")


def resolve_stop_words_path(value: Any) -> Optional[Path]:
    """Resolve `summarizer.stop_words_path`; relative paths live under the data dir."""
    if not value:
        return None
    return resolve_data_file(str(value))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigManager:
    """Manages loading and validation of the YAML configuration file."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the manager and ensure a baseline config file exists."""
        path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        if not path.is_absolute():
            path = path.resolve()
        self.config_path = str(path)
        self.base_dir = str(path.parent)
        self._config = None
        self._ensure_default_config()

    def load_config(self) -> Dict[str, Any]:
        """Load the main configuration file."""
        if self._config is None:
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self._config = yaml.safe_load(f) or {}
                logger.info(f"Loaded configuration from {self.config_path}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.config_path}: {e}")
                raise

        return self._config

    def _ensure_default_config(self) -> None:
        """Create the default configuration file if it is missing."""
        config_file = Path(self.config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        if config_file.exists():
            return

        if _TEMPLATE_CONFIG.exists():
            try:
                shutil.copyfile(_TEMPLATE_CONFIG, config_file)
                logger.info("Created default config.yaml at %s", config_file)
                return
            except Exception as exc:
                logger.warning("Failed to copy template config: %s", exc)
        _write_template(config_file, _DEFAULT_CONFIG_TEMPLATE)
        logger.info("Created fallback default config.yaml at %s", config_file)

    def get_section(self, name: str) -> Dict[str, Any]:
        """Return a top-level section of the config, or an empty dict."""
        config = self.load_config()
        section = config.get(name) or {}
        return section if isinstance(section, dict) else {}

    def get_percent_to_keep(self) -> float:
        """Fraction of scored sentences kept in each summary."""
        value = self.get_section('summarizer').get('percent_to_keep')
        return DEFAULT_PERCENT_TO_KEEP if value is None else float(value)

    def get_stop_words_path(self) -> Optional[Path]:
        """Configured stop-word list path, or None for the bundled list."""
        return resolve_stop_words_path(self.get_section('summarizer').get('stop_words_path'))

    def validate_config(self) -> bool:
        """Validate the configuration file."""
        try:
            config = self.load_config()
            if not isinstance(config, dict):
                logger.error("Configuration root must be a mapping")
                return False

            for section in ('retrieval', 'summarizer'):
                if section in config and not isinstance(config[section] or {}, dict):
                    logger.error(f"Section '{section}' must be a mapping")
                    return False

            retrieval = self.get_section('retrieval')
            rps = retrieval.get('rps')
            if rps is not None and (not _is_number(rps) or rps <= 0):
                logger.error("'retrieval.rps' must be a positive number")
                return False
            max_retries = retrieval.get('max_retries')
            if max_retries is not None and (not isinstance(max_retries, int) or max_retries < 1):
                logger.error("'retrieval.max_retries' must be an integer >= 1")
                return False
            timeout = retrieval.get('timeout')
            if timeout is not None and (not _is_number(timeout) or timeout <= 0):
                logger.error("'retrieval.timeout' must be a positive number")
                return False

            summarizer = self.get_section('summarizer')
            percent = summarizer.get('percent_to_keep')
            if percent is not None and (not _is_number(percent) or not 0 <= percent <= 1):
                logger.error("'summarizer.percent_to_keep' must be a number between 0 and 1")
                return False
            stop_words_path = resolve_stop_words_path(summarizer.get('stop_words_path'))
            if stop_words_path and not stop_words_path.exists():
                logger.warning(f"Stop-word list not found at {stop_words_path}")

            logger.info("Configuration validation passed")
            return True

        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            return False


__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_PERCENT_TO_KEEP",
    "resolve_stop_words_path",
]
