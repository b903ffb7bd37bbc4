"""
Title and body extraction heuristics over retrieved HTML nodes.

Nodes only need ``get_text()`` and ``has_attr(name)``, which BeautifulSoup
tags provide. These heuristics are tuned to a particular news-page layout and
are kept here so they can be replaced without touching the scorers.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.models import UNAVAILABLE_TITLE

# The first <p> on the page holds publication metadata
BODY_START_INDEX = 1
# The first <p> after the body that carries this attribute starts the topics block
BODY_END_ATTRIBUTE = "class"


class Node(Protocol):
    def get_text(self) -> str: ...

    def has_attr(self, key: str) -> bool: ...


def extract_title(h1_nodes: Optional[Sequence[Node]]) -> str:
    """Inner text of the last heading, or ``UNAVAILABLE`` when there is none."""
    if not h1_nodes:
        return UNAVAILABLE_TITLE
    return h1_nodes[-1].get_text()


def extract_text(p_nodes: Optional[Sequence[Node]]) -> str:
    """Concatenate article paragraphs into one string.

    Skips the first paragraph unconditionally and stops at the first later
    paragraph that has a ``class`` attribute.
    """
    if not p_nodes:
        return ""
    parts = []
    for node in p_nodes[BODY_START_INDEX:]:
        if node.has_attr(BODY_END_ATTRIBUTE):
            break
        parts.append(node.get_text())
    return "".join(parts)
