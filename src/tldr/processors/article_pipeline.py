"""
Article summarization pipeline.

Turns one URL into an :class:`ArticleSummary`:

- validate the URL (absolute, with scheme and host)
- title from the last ``<h1>``, body from the article ``<p>`` run
- count and rank non-stop words, bucket them into 1-5 point scores
- score the period-delimited sentences and keep the best fraction
- rebuild the summary from the kept sentences in article order

Batches are processed one URL at a time and returned as a FIFO queue.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Dict, Iterable, List, Optional, Protocol
from urllib.parse import urlparse

from ..core.config import DEFAULT_PERCENT_TO_KEEP, resolve_stop_words_path
from ..core.models import ArticleSummary
from ..core.stop_words import StopWordSet
from ..core.text_utils import clean_text, split_sentences, split_words
from .extractor import extract_text, extract_title
from .html_retriever import HTMLRetriever
from .sentence_scorer import build_summary, score_sentences, sort_sentences
from .word_scorer import count_words, score_words, sort_words

logger = logging.getLogger(__name__)


class NodeRetriever(Protocol):
    def select_nodes(self, url: str, tag: str) -> List[Any]: ...


def validate_url(url: str) -> bool:
    """True when *url* is an absolute URI with both a scheme and a host.

    Examples:
        >>> validate_url("http://www.abc.net.au/")
        True
        >>> validate_url("www.google.com")
        False
    """
    try:
        parsed = urlparse(url)
        if any(c.isspace() for c in parsed.netloc):
            return False
        return bool(parsed.scheme) and bool(parsed.hostname)
    except ValueError:
        return False


def parse_url_block(text: str) -> List[str]:
    """Split a newline-delimited block of URLs, ignoring blank lines."""
    urls = []
    for line in text.split("\n"):
        url = line.strip("\r").strip()
        if url:
            urls.append(url)
    return urls


def summarize_text(text: str, stop_words: StopWordSet,
                   percent_to_keep: float = DEFAULT_PERCENT_TO_KEEP) -> str:
    """Produce an extractive summary of already-extracted article text."""
    words = split_words(clean_text(text))
    word_counts = count_words(words, stop_words)
    word_scores = score_words(sort_words(word_counts))

    raw_sentences = split_sentences(text)
    sentence_scores = score_sentences(raw_sentences, word_scores)
    final_sentences = sort_sentences(sentence_scores, percent_to_keep)
    logger.debug(
        "Scored %d words and %d sentences; keeping %d",
        len(word_scores), len(sentence_scores), len(final_sentences),
    )
    return build_summary(raw_sentences, final_sentences)


class ArticlePipeline:
    """Generate extractive summaries for article URLs.

    Args:
        retriever: Source of HTML nodes; anything with ``select_nodes(url, tag)``
        stop_words: Stop-word set; loaded on the first generation if still empty
        percent_to_keep: Fraction of scored sentences kept in each summary
    """

    def __init__(
        self,
        retriever: NodeRetriever,
        stop_words: Optional[StopWordSet] = None,
        percent_to_keep: float = DEFAULT_PERCENT_TO_KEEP,
    ):
        self.retriever = retriever
        self.stop_words = stop_words if stop_words is not None else StopWordSet()
        self.percent_to_keep = percent_to_keep
        self.summaries_generated = 0

    @classmethod
    def from_config(cls, config: Dict[str, Any],
                    retriever: Optional[NodeRetriever] = None) -> "ArticlePipeline":
        """Build a pipeline from a loaded config dict, loading stop words up front.

        Raises:
            ResourceLoadError: If the stop-word list cannot be read.
        """
        summarizer = config.get('summarizer') or {}
        stop_words = StopWordSet(resolve_stop_words_path(summarizer.get('stop_words_path')))
        stop_words.load()

        if retriever is None:
            retriever = HTMLRetriever.from_config(config.get('retrieval'))

        percent = summarizer.get('percent_to_keep')
        return cls(
            retriever,
            stop_words,
            DEFAULT_PERCENT_TO_KEEP if percent is None else float(percent),
        )

    def generate(self, url: str) -> ArticleSummary:
        """Summarize the article at *url*.

        Invalid URLs produce a placeholder summary rather than an error.

        Raises:
            ResourceLoadError: If stop words need loading and cannot be read.
        """
        if self.summaries_generated == 0 and not self.stop_words.loaded:
            self.stop_words.load()

        if not validate_url(url):
            logger.warning(f"Invalid URL, skipping: {url!r}")
            return ArticleSummary.invalid_url(url)

        h1_nodes = self.retriever.select_nodes(url, "h1")
        title = extract_title(h1_nodes)
        if not h1_nodes:
            logger.debug(f"No <h1> found at {url}")

        text = extract_text(self.retriever.select_nodes(url, "p"))
        summary = summarize_text(text, self.stop_words, self.percent_to_keep)

        self.summaries_generated += 1
        logger.info(f"Summarized {url} ({len(text)} chars -> {len(summary)} chars)")
        return ArticleSummary(url, title, summary)

    def generate_many(self, urls: Iterable[str]) -> Deque[ArticleSummary]:
        """Summarize *urls* in order and return the results as a FIFO queue."""
        queue: Deque[ArticleSummary] = deque()
        for url in urls:
            queue.append(self.generate(url))
        return queue
