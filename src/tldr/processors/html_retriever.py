"""
HTML retrieval for article pages.

Fetches a page once through :class:`RetryableHTTPClient`, parses it with
BeautifulSoup and answers tag queries against the parsed document. Any fetch
failure is logged and reported as an empty node list so the pipeline can
degrade to an empty summary.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests
from bs4 import BeautifulSoup

from ..core.http_client import RetryableHTTPClient

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


def _is_html(response) -> bool:
    """True when the response declares an HTML (or XHTML) content type."""
    content_type = (response.headers.get("Content-Type") or "").lower()
    return "html" in content_type


class HTMLRetriever:
    """Fetch article pages and select nodes by tag name.

    The most recently fetched document is kept so that asking for ``h1`` and
    then ``p`` on the same URL costs a single request.
    """

    def __init__(self, client: Optional[RetryableHTTPClient] = None):
        self.client = client or RetryableHTTPClient()
        self._cached_url: Optional[str] = None
        self._cached_doc: Optional[BeautifulSoup] = None

    @classmethod
    def from_config(cls, retrieval: Optional[Dict[str, Any]] = None) -> "HTMLRetriever":
        """Build a retriever from the ``retrieval`` config section."""
        retrieval = retrieval or {}
        kwargs = {
            key: retrieval[key]
            for key in ("rps", "max_retries", "timeout", "user_agent")
            if retrieval.get(key) is not None
        }
        return cls(RetryableHTTPClient(**kwargs))

    def _fetch_document(self, url: str) -> Optional[BeautifulSoup]:
        if url == self._cached_url:
            return self._cached_doc

        doc = None
        try:
            response = self.client.get_with_retry(url)
            if response is None:
                logger.warning(f"No content retrieved from {url}")
            elif not _is_html(response):
                content_type = response.headers.get("Content-Type")
                logger.warning(f"Skipping non-HTML response from {url} (Content-Type: {content_type})")
            else:
                doc = BeautifulSoup(response.text, HTML_PARSER)
        except requests.RequestException as e:
            logger.warning(f"Failed to retrieve {url}: {e}")

        # failures are cached too, so a URL is requested at most once in a row
        self._cached_url = url
        self._cached_doc = doc
        return doc

    def select_nodes(self, url: str, tag: str) -> List[Any]:
        """Return all elements named *tag* on the page at *url*, in document order."""
        doc = self._fetch_document(url)
        if doc is None:
            return []
        return doc.find_all(tag)

    def clear(self) -> None:
        """Forget the cached document."""
        self._cached_url = None
        self._cached_doc = None

    def close(self) -> None:
        self.clear()
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
