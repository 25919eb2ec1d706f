"""
Bounded Damerau-Levenshtein Distance
====================================
Optimal string alignment distance with an upper bound.

Insertions, deletions, substitutions and adjacent transpositions all cost 1.
Anything farther apart than the bound is reported as DISTANCE_EXCEEDED, and
rows that can no longer come back under the bound stop the computation early.
"""

from typing import List

# Returned when the true distance is greater than max_distance
DISTANCE_EXCEEDED = -1


def damerau_levenshtein_distance(source: str, target: str, max_distance: int) -> int:
    """
    Compute the edit distance between two strings, bounded by max_distance.

    Args:
        source: String being corrected
        target: Candidate string
        max_distance: Largest distance worth reporting

    Returns:
        The distance if it is <= max_distance, otherwise DISTANCE_EXCEEDED
    """
    len1 = len(source)
    len2 = len(target)

    if len1 == 0:
        return len2 if len2 <= max_distance else DISTANCE_EXCEEDED
    if len2 == 0:
        return len1 if len1 <= max_distance else DISTANCE_EXCEEDED
    if abs(len1 - len2) > max_distance:
        return DISTANCE_EXCEEDED
    if source == target:
        return 0

    matrix: List[List[int]] = [[0] * (len2 + 1) for _ in range(len1 + 1)]
    for i in range(len1 + 1):
        matrix[i][0] = i
    for j in range(len2 + 1):
        matrix[0][j] = j

    for i in range(1, len1 + 1):
        row = matrix[i]
        above = matrix[i - 1]
        source_char = source[i - 1]
        min_in_row = row[0]

        for j in range(1, len2 + 1):
            cost = 0 if source_char == target[j - 1] else 1

            value = min(
                above[j] + 1,          # deletion
                row[j - 1] + 1,        # insertion
                above[j - 1] + cost,   # substitution
            )

            # Adjacent transposition: "ab" <-> "ba"
            if (i > 1 and j > 1
                    and source_char == target[j - 2]
                    and source[i - 2] == target[j - 1]):
                value = min(value, matrix[i - 2][j - 2] + 1)

            row[j] = value
            if value < min_in_row:
                min_in_row = value

        # No cell can shrink below its row's minimum further down
        if min_in_row > max_distance:
            return DISTANCE_EXCEEDED

    distance = matrix[len1][len2]
    return distance if distance <= max_distance else DISTANCE_EXCEEDED


def is_within(source: str, target: str, max_distance: int) -> bool:
    """True if the two strings are at most max_distance edits apart."""
    return damerau_levenshtein_distance(source, target, max_distance) != DISTANCE_EXCEEDED
