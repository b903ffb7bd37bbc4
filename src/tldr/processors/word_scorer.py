"""
Word frequency scoring.

Words are counted (minus stop words), ranked by count, and the ranked list is
cut into percentile buckets worth 5 down to 1 point. Words outside the top
80% of the ranking get no score at all.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..core.stop_words import StopWordSet

# (upper bound as a fraction of the ranked list, score), checked in order
SCORE_BUCKETS = (
    (0.05, 5),
    (0.2, 4),
    (0.4, 3),
    (0.6, 2),
    (0.8, 1),
)


def count_words(words: Iterable[str], stop_words: StopWordSet) -> Dict[str, int]:
    """Count occurrences of each non-stop word.

    The stop-word check only happens the first time a word is seen; later
    occurrences of a word already in the map are incremented unconditionally.
    """
    counts: Dict[str, int] = {}
    for word in words:
        if word not in counts:
            if not stop_words.contains(word):
                counts[word] = 1
        else:
            counts[word] += 1
    return counts


def sort_words(counts: Dict[str, int]) -> List[str]:
    """Return words seen more than once, most frequent first.

    Ties keep the order in which the words were first counted.
    """
    repeated = [(word, count) for word, count in counts.items() if count > 1]
    repeated.sort(key=lambda item: item[1], reverse=True)
    return [word for word, _ in repeated]


def score_words(ranked: Sequence[str]) -> Dict[str, int]:
    """Assign percentile-bucket scores to ranked words.

    The word at position ``i`` of ``n`` gets the score of the first bucket with
    ``i < fraction * n``. Assignment stops at the first word past the last
    bucket, so lower-ranked words are absent from the result.
    """
    n = len(ranked)
    scores: Dict[str, int] = {}
    for i, word in enumerate(ranked):
        score = next((s for fraction, s in SCORE_BUCKETS if i < fraction * n), None)
        if score is None:
            break
        scores[word] = score
    return scores
