"""
Friends-of-friends suggestions.

A candidate's ``mutual_count`` is the number of 2-hop paths that reach it
through users the requester already follows: a candidate followed by two of the
requester's followees scores 2. Every other eligible user is listed with a
count of 0, so the ranking covers everyone the requester does not yet follow.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Set

from . import graph
from .errors import NotFoundError
from .models import Suggestion
from .store import StoreSnapshot

logger = logging.getLogger(__name__)


def _adjacency(snapshot: StoreSnapshot) -> Dict[str, Set[str]]:
    followees: Dict[str, Set[str]] = defaultdict(set)
    for edge in snapshot.follows:
        followees[edge.follower_id].add(edge.followee_id)
    return followees


def mutual_counts(snapshot: StoreSnapshot, user_id: str) -> Dict[str, int]:
    """Tally 2-hop paths to every eligible candidate, including zero-path users."""
    followees = _adjacency(snapshot)
    already_following = graph.followees_of(snapshot, user_id)

    counts: Dict[str, int] = defaultdict(int)
    for followee_id in already_following:
        for candidate_id in followees.get(followee_id, ()):
            if candidate_id == user_id or candidate_id in already_following:
                continue
            counts[candidate_id] += 1

    for candidate_id in snapshot.users:
        if candidate_id == user_id or candidate_id in already_following:
            continue
        counts.setdefault(candidate_id, 0)
    return dict(counts)


def suggest(snapshot: StoreSnapshot, user_id: str) -> List[Suggestion]:
    """Rank suggestions by mutual count descending, then user id ascending."""
    if user_id not in snapshot.users:
        raise NotFoundError("user not found")

    counts = mutual_counts(snapshot, user_id)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    suggestions = [
        Suggestion(user=snapshot.users[candidate_id], mutual_count=count)
        for candidate_id, count in ranked
        if candidate_id in snapshot.users
    ]
    logger.debug("Ranked %d suggestions for user %s", len(suggestions), user_id)
    return suggestions
