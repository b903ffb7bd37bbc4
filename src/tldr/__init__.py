from __future__ import annotations

import logging
import os
from typing import Any, Deque, Dict, Iterable, Optional

from .commands import summarize as summarize_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.errors import ResourceLoadError, TldrError
from .core.models import ArticleSummary
from .core.stop_words import StopWordSet
from .processors.article_pipeline import ArticlePipeline, validate_url

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = str(DEFAULT_CONFIG_PATH)

__all__ = [
    'generate',
    'summarize',
    'status',
    'ArticlePipeline',
    'ArticleSummary',
    'StopWordSet',
    'ResourceLoadError',
    'TldrError',
    'validate_url',
]


def summarize(
    urls: Iterable[str],
    *,
    percent_to_keep: Optional[float] = None,
    config_path: Optional[str] = None,
    retriever=None,
) -> Deque[ArticleSummary]:
    """Summarize several URLs in order and return the results as a queue.

    Args:
        urls: Article URLs, processed one at a time
        percent_to_keep: Fraction of sentences to keep (overrides config)
        config_path: Path to main YAML config; defaults to the data dir config
        retriever: Optional node retriever replacing HTTP retrieval
    """
    cfg_path = config_path or _DEFAULT_CONFIG
    return summarize_cmd.run(cfg_path, urls, percent_to_keep=percent_to_keep, retriever=retriever)


def generate(
    url: str,
    *,
    percent_to_keep: Optional[float] = None,
    config_path: Optional[str] = None,
    retriever=None,
) -> ArticleSummary:
    """Summarize a single article URL."""
    return summarize(
        [url],
        percent_to_keep=percent_to_keep,
        config_path=config_path,
        retriever=retriever,
    ).popleft()


def status(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Return configuration and stop-word status for programmatic use."""
    cfg_path = config_path or _DEFAULT_CONFIG
    info: Dict[str, Any] = {'config_path': cfg_path}
    if not os.path.exists(cfg_path):
        info.update({'valid': False, 'error': f'Config file not found: {cfg_path}'})
        return info
    try:
        cm = ConfigManager(cfg_path)
        valid = cm.validate_config()
        stop_words = StopWordSet(cm.get_stop_words_path())
        stop_words.load()
        info.update({
            'valid': bool(valid),
            'percent_to_keep': cm.get_percent_to_keep(),
            'stop_words_path': str(stop_words.path),
            'stop_words_count': len(stop_words),
        })
        return info
    except Exception as e:
        info.update({'valid': False, 'error': str(e)})
        return info
