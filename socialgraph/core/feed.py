from __future__ import annotations

from typing import List

from . import graph
from .errors import NotFoundError
from .models import FeedEntry
from .store import StoreSnapshot


def build_feed(snapshot: StoreSnapshot, user_id: str) -> List[FeedEntry]:
    """Posts written by the users ``user_id`` follows, newest first.

    A user never follows themself, so their own posts are never included.
    """
    if user_id not in snapshot.users:
        raise NotFoundError("user not found")

    followee_ids = graph.followees_of(snapshot, user_id)
    posts = graph.newest_first(
        post for post in snapshot.posts.values() if post.author_id in followee_ids
    )
    return [FeedEntry(post=post, author=snapshot.users.get(post.author_id)) for post in posts]
