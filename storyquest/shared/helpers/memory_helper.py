"""
Helpers for picking which story posts the narrator gets to see.
"""
from typing import List, Optional


def get_recent_memories(memory_log, limit: Optional[int] = None):
    """Get the most recent items from a chronologically ordered log."""
    if limit is None:
        return memory_log
    if limit <= 0:
        return []
    return memory_log[-limit:]


def fit_to_budget(entries: List[str], budget: int, count_tokens) -> List[str]:
    """
    Keep the newest entries that fit in the token budget.
    Walks newest to oldest and stops at the first entry that does not fit.
    The result is returned in chronological order.
    """
    kept = []
    available = budget
    for entry in reversed(entries):
        tokens = count_tokens(entry)
        if tokens > available:
            break
        kept.insert(0, entry)  # keep chronological order
        available -= tokens
    return kept
