"""
In-memory relation store backing the social graph.

Users and posts are keyed by id; follow and like edges are kept as flat lists
in insertion order. The store performs no referential-integrity checks: callers
verify existence before writing edges. One re-entrant lock guards every
collection so that callers can hold it across a check-then-write sequence and
readers can take a consistent snapshot.
"""

from __future__ import annotations

import dataclasses
import threading
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from .models import Follow, Like, Post, User


@dataclass(frozen=True)
class StoreSnapshot:
    """Point-in-time copy of every collection, safe to read without the lock."""

    users: Mapping[str, User]
    posts: Mapping[str, Post]
    follows: Tuple[Follow, ...]
    likes: Tuple[Like, ...]


class RelationStore:
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._posts: Dict[str, Post] = {}
        self._follows: List[Follow] = []
        self._likes: List[Like] = []
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # --- users -----------------------------------------------------------

    def put_user(self, user: User) -> None:
        with self._lock:
            self._users[user.id] = user

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def list_users(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    # --- posts -----------------------------------------------------------

    def put_post(self, post: Post) -> None:
        with self._lock:
            self._posts[post.id] = post

    def get_post(self, post_id: str) -> Optional[Post]:
        with self._lock:
            return self._posts.get(post_id)

    def list_posts(self) -> List[Post]:
        with self._lock:
            return list(self._posts.values())

    def delete_post(self, post_id: str) -> Optional[Post]:
        """Remove a post together with every like edge that references it."""
        with self._lock:
            post = self._posts.pop(post_id, None)
            if post is not None:
                self._likes = [like for like in self._likes if like.post_id != post_id]
            return post

    # --- follows ---------------------------------------------------------

    def add_follow(self, follower_id: str, followee_id: str) -> Follow:
        edge = Follow(follower_id=follower_id, followee_id=followee_id)
        with self._lock:
            self._follows.append(edge)
        return edge

    def has_follow(self, follower_id: str, followee_id: str) -> bool:
        edge = Follow(follower_id=follower_id, followee_id=followee_id)
        with self._lock:
            return edge in self._follows

    def remove_follow(self, follower_id: str, followee_id: str) -> bool:
        edge = Follow(follower_id=follower_id, followee_id=followee_id)
        with self._lock:
            try:
                self._follows.remove(edge)
            except ValueError:
                return False
            return True

    def list_follows(self) -> List[Follow]:
        with self._lock:
            return list(self._follows)

    # --- likes -----------------------------------------------------------

    def add_like(self, user_id: str, post_id: str) -> Post:
        """Record a like edge and bump the post's counter in the same step.

        Raises KeyError if the post is not stored.
        """
        with self._lock:
            post = self._posts[post_id]
            self._likes.append(Like(user_id=user_id, post_id=post_id))
            post = dataclasses.replace(post, likes_count=post.likes_count + 1)
            self._posts[post_id] = post
            return post

    def has_like(self, user_id: str, post_id: str) -> bool:
        with self._lock:
            return Like(user_id=user_id, post_id=post_id) in self._likes

    def remove_like(self, user_id: str, post_id: str) -> bool:
        with self._lock:
            try:
                self._likes.remove(Like(user_id=user_id, post_id=post_id))
            except ValueError:
                return False
            post = self._posts.get(post_id)
            if post is not None:
                self._posts[post_id] = dataclasses.replace(
                    post, likes_count=max(0, post.likes_count - 1)
                )
            return True

    def list_likes(self) -> List[Like]:
        with self._lock:
            return list(self._likes)

    # --- whole store -----------------------------------------------------

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return StoreSnapshot(
                users=dict(self._users),
                posts=dict(self._posts),
                follows=tuple(self._follows),
                likes=tuple(self._likes),
            )

    def reset(self) -> None:
        with self._lock:
            self._users = {}
            self._posts = {}
            self._follows = []
            self._likes = []
