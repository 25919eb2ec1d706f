"""
Delete-variant generation for the SymSpell index.
"""

from collections import deque
from typing import Set


def generate_deletes(word: str, max_distance: int) -> Set[str]:
    """
    Return every string reachable by deleting 1..max_distance characters.

    Expansion is breadth-first so each variant is produced at its shallowest
    depth; the word itself is never part of the result.
    """
    deletes: Set[str] = set()
    if max_distance <= 0 or not word:
        return deletes

    seen = {word}
    queue = deque([(word, 0)])

    while queue:
        current, depth = queue.popleft()
        if depth >= max_distance:
            continue

        for i in range(len(current)):
            child = current[:i] + current[i + 1:]
            if child in seen:
                continue
            seen.add(child)
            deletes.add(child)
            queue.append((child, depth + 1))

    return deletes
