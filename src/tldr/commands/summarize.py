"""
Summarize command: turn a batch of URLs into a queue of article summaries.

- URLs come from the command line and/or a newline-delimited file.
- Each URL is summarized in order; invalid URLs yield a placeholder entry.
- The queue is rendered as plain text or JSON, to stdout or a file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Deque, Iterable, List, Optional

from ..core.command_context import CommandContext
from ..core.models import ArticleSummary
from ..processors.article_pipeline import parse_url_block

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


def collect_urls(urls: Iterable[str] = (), url_file: Optional[str] = None) -> List[str]:
    """Combine URLs given directly with those read from *url_file*, in that order."""
    collected = [u.strip() for u in urls if u and u.strip()]
    if url_file:
        text = Path(url_file).expanduser().read_text(encoding="utf-8")
        collected.extend(parse_url_block(text))
    return collected


def render_text(summaries: Iterable[ArticleSummary]) -> str:
    """Render summaries one after another as title, URL and body blocks."""
    blocks = []
    for article in summaries:
        title = article.title.strip() or article.url
        blocks.append(f"{title}\n{'=' * len(title)}\n{article.url}\n\n{article.summary}")
    return "\n".join(blocks)


def render_json(summaries: Iterable[ArticleSummary]) -> str:
    return json.dumps([s.to_dict() for s in summaries], indent=2, ensure_ascii=False)


def render(summaries: Iterable[ArticleSummary], fmt: str = "text") -> str:
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format '{fmt}' (expected one of {', '.join(OUTPUT_FORMATS)})")
    if fmt == "json":
        return render_json(summaries)
    return render_text(summaries)


def run(
    config_path: Optional[str],
    urls: Iterable[str],
    *,
    percent_to_keep: Optional[float] = None,
    retriever=None,
) -> Deque[ArticleSummary]:
    """
    Summarize *urls* sequentially.

    Args:
        config_path: Path to main config
        urls: URLs to summarize, in submission order
        percent_to_keep: Optional override of summarizer.percent_to_keep
        retriever: Optional node retriever (defaults to HTTP retrieval)

    Returns:
        Queue of ArticleSummary records in submission order
    """
    url_list = list(urls)
    logger.info(f"Starting summarize command for {len(url_list)} URL(s)")

    with CommandContext(config_path, retriever=retriever) as ctx:
        if percent_to_keep is not None:
            if not 0 <= percent_to_keep <= 1:
                raise ValueError("percent_to_keep must be between 0 and 1")
            ctx.pipeline.percent_to_keep = percent_to_keep
        queue = ctx.pipeline.generate_many(url_list)

    logger.info(f"Summarize command finished: {len(queue)} summaries queued")
    return queue


def write_output(content: str, output: Optional[str]) -> Optional[Path]:
    """Write rendered output to *output*; returns the path, or None when not given."""
    if not output:
        return None
    path = Path(output).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"Wrote summaries to {path}")
    return path
