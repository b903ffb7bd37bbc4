"""
Command context for shared initialization across CLI commands.

Loads and validates the config and builds the summarization pipeline so that
commands do not repeat the wiring.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..processors.article_pipeline import ArticlePipeline
from .config import ConfigManager


logger = logging.getLogger(__name__)


class CommandContext:
    """Encapsulates config loading, validation and pipeline construction.

    Example:
        ```python
        with CommandContext(config_path) as ctx:
            summary = ctx.pipeline.generate(url)
        ```
    """

    def __init__(self, config_path: Optional[str] = None, retriever=None):
        """Initialize command context with config and pipeline.

        Args:
            config_path: Path to main config file (None = use default)
            retriever: Optional node retriever replacing the HTTP one

        Raises:
            ValueError: If configuration is invalid
            ResourceLoadError: If the stop-word list cannot be read
        """
        self.config_manager = ConfigManager(config_path)

        if not self.config_manager.validate_config():
            raise ValueError("Invalid configuration. Run 'tldr status' for details.")

        self.config = self.config_manager.load_config()
        self.pipeline = ArticlePipeline.from_config(self.config, retriever=retriever)

        logger.debug(f"CommandContext initialized with config from {self.config_manager.config_path}")

    def close(self) -> None:
        close = getattr(self.pipeline.retriever, "close", None)
        if callable(close):
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
