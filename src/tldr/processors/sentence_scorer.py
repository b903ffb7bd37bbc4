"""
Sentence scoring, selection and summary assembly.

Sentences are scored by summing the scores of their words, the best-scoring
fraction is kept, and the summary is rebuilt from the original sentence
sequence so that sentences appear in article order.
"""

from __future__ import annotations

import math
from typing import Collection, Dict, List, Sequence

from ..core.config import DEFAULT_PERCENT_TO_KEEP
from ..core.text_utils import clean_text

SENTENCE_TERMINATOR = ". \n\n"

_INT16_MAX = 32767


def score_sentences(sentences: Sequence[str], word_scores: Dict[str, int]) -> Dict[str, int]:
    """Score each raw sentence by the sum of its word scores.

    Keys are the raw sentences exactly as given. A sentence string that repeats
    (including empty strings from trailing periods) keeps its first score.
    """
    scores: Dict[str, int] = {}
    for sentence in sentences:
        words = clean_text(sentence).split()
        score = sum(word_scores.get(word, 0) for word in words)
        if sentence not in scores:
            scores[sentence] = score
    return scores


def keep_count(percent_to_keep: float, total: int) -> int:
    """Number of sentences to keep, rounding halves away from zero.

    The result is clamped to the 0..32767 range.
    """
    product = percent_to_keep * total
    rounded = int(math.copysign(math.floor(abs(product) + 0.5), product))
    return min(max(rounded, 0), _INT16_MAX)


def sort_sentences(scores: Dict[str, int], percent_to_keep: float = DEFAULT_PERCENT_TO_KEEP) -> List[str]:
    """Return the top ``percent_to_keep`` fraction of sentences, best first.

    Sentences with equal scores keep their insertion order.
    """
    ranked = sorted(scores, key=scores.get, reverse=True)
    return ranked[:keep_count(percent_to_keep, len(scores))]


def build_summary(raw_sentences: Sequence[str], final_sentences: Collection[str]) -> str:
    """Join the selected sentences in their original order.

    Each selected sentence is followed by ``". \\n\\n"``; a selected sentence
    that occurs several times in *raw_sentences* is emitted once per occurrence.
    """
    selected = set(final_sentences)
    parts = []
    for sentence in raw_sentences:
        if sentence in selected:
            parts.append(sentence)
            parts.append(SENTENCE_TERMINATOR)
    return "".join(parts)
