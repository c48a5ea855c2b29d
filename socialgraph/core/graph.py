"""Graph queries derived from the raw follow, like and post collections.

Every function reads a ``StoreSnapshot`` and never raises: callers check that
the ids they pass in exist. Edge endpoints that no longer resolve to a user are
dropped from the resolved lists.
"""

from __future__ import annotations

from typing import Iterable, List, Set

from .models import Post, User, UserProfile
from .store import StoreSnapshot


def _resolve(snapshot: StoreSnapshot, user_ids: Iterable[str]) -> List[User]:
    users = (snapshot.users.get(user_id) for user_id in user_ids)
    return [user for user in users if user is not None]


def followees_of(snapshot: StoreSnapshot, user_id: str) -> Set[str]:
    return {edge.followee_id for edge in snapshot.follows if edge.follower_id == user_id}


def followers_of(snapshot: StoreSnapshot, user_id: str) -> List[User]:
    return _resolve(
        snapshot,
        (edge.follower_id for edge in snapshot.follows if edge.followee_id == user_id),
    )


def following_of(snapshot: StoreSnapshot, user_id: str) -> List[User]:
    return _resolve(
        snapshot,
        (edge.followee_id for edge in snapshot.follows if edge.follower_id == user_id),
    )


def follower_count(snapshot: StoreSnapshot, user_id: str) -> int:
    return sum(1 for edge in snapshot.follows if edge.followee_id == user_id)


def following_count(snapshot: StoreSnapshot, user_id: str) -> int:
    return sum(1 for edge in snapshot.follows if edge.follower_id == user_id)


def post_count(snapshot: StoreSnapshot, user_id: str) -> int:
    return sum(1 for post in snapshot.posts.values() if post.author_id == user_id)


def likers_of(snapshot: StoreSnapshot, post_id: str) -> List[User]:
    return _resolve(
        snapshot,
        (like.user_id for like in snapshot.likes if like.post_id == post_id),
    )


def newest_first(posts: Iterable[Post]) -> List[Post]:
    # Post id breaks timestamp ties so equal-time posts keep a stable order.
    return sorted(posts, key=lambda post: (post.created_at, post.id), reverse=True)


def posts_by(snapshot: StoreSnapshot, user_id: str) -> List[Post]:
    return newest_first(post for post in snapshot.posts.values() if post.author_id == user_id)


def profile_of(snapshot: StoreSnapshot, user: User) -> UserProfile:
    return UserProfile(
        user=user,
        follower_count=follower_count(snapshot, user.id),
        following_count=following_count(snapshot, user.id),
        post_count=post_count(snapshot, user.id),
    )
