"""
Social graph service: the operations request handlers call.

Each mutation holds the store lock from its first existence check to its last
write, so a rejected request leaves nothing behind and two requests touching
the same keys cannot interleave. Reads take a snapshot and hand it to the pure
query modules.
"""

from __future__ import annotations

import datetime as dt
import logging
import uuid
from typing import Callable, List, Optional, Union

from . import graph
from .errors import ConflictError, InvalidInputError, NotFoundError
from .feed import build_feed
from .models import FeedEntry, Follow, MediaType, Post, Suggestion, User, UserProfile
from .store import RelationStore
from .suggestions import suggest

logger = logging.getLogger(__name__)

Clock = Callable[[], dt.datetime]


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _clean(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ""


def _media_type(value: Union[MediaType, str, None]) -> Optional[MediaType]:
    if value is None or value == "none":
        return None
    try:
        return MediaType(value)
    except ValueError as exc:
        raise InvalidInputError('media_type must be "image", "video", or null') from exc


class SocialService:
    """Coordinates users, posts and relationships on top of a RelationStore."""

    def __init__(self, store: Optional[RelationStore] = None, clock: Clock = _utcnow) -> None:
        self.store = store or RelationStore()
        self._clock = clock

    # --- users -----------------------------------------------------------

    def register_user(
        self,
        username: str,
        display_name: str,
        bio: Optional[str] = "",
        profile_pic_url: Optional[str] = None,
    ) -> User:
        username = _clean(username)
        display_name = _clean(display_name)
        if not username:
            raise InvalidInputError("username is required")
        if not display_name:
            raise InvalidInputError("display_name is required")

        with self.store.lock:
            lowered = username.lower()
            if any(user.username.lower() == lowered for user in self.store.list_users()):
                logger.warning("Rejected registration: username %r already taken", username)
                raise ConflictError("username already taken")
            user = User(
                id=uuid.uuid4().hex,
                username=username,
                display_name=display_name,
                bio=_clean(bio),
                profile_pic_url=profile_pic_url or None,
                created_at=self._clock(),
            )
            self.store.put_user(user)
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user

    def get_user(self, user_id: str) -> User:
        user = self.store.get_user(user_id)
        if user is None:
            raise NotFoundError("user not found")
        return user

    def list_users(self) -> List[User]:
        return self.store.list_users()

    def get_profile(self, user_id: str) -> UserProfile:
        snapshot = self.store.snapshot()
        user = snapshot.users.get(user_id)
        if user is None:
            raise NotFoundError("user not found")
        return graph.profile_of(snapshot, user)

    def followers(self, user_id: str) -> List[User]:
        snapshot = self.store.snapshot()
        if user_id not in snapshot.users:
            raise NotFoundError("user not found")
        return graph.followers_of(snapshot, user_id)

    def following(self, user_id: str) -> List[User]:
        snapshot = self.store.snapshot()
        if user_id not in snapshot.users:
            raise NotFoundError("user not found")
        return graph.following_of(snapshot, user_id)

    # --- posts -----------------------------------------------------------

    def create_post(
        self,
        author_id: str,
        content: str,
        media_type: Union[MediaType, str, None] = None,
        media_url: Optional[str] = None,
    ) -> Post:
        content = _clean(content)
        if not content:
            raise InvalidInputError("content is required")
        kind = _media_type(media_type)

        with self.store.lock:
            if not author_id or self.store.get_user(author_id) is None:
                raise InvalidInputError("author_id is missing or does not refer to a valid user")
            post = Post(
                id=uuid.uuid4().hex,
                author_id=author_id,
                content=content,
                media_type=kind,
                media_url=media_url or None,
                created_at=self._clock(),
            )
            self.store.put_post(post)
        logger.info("User %s created post %s", author_id, post.id)
        return post

    def get_post(self, post_id: str) -> Post:
        post = self.store.get_post(post_id)
        if post is None:
            raise NotFoundError("post not found")
        return post

    def get_post_with_author(self, post_id: str) -> FeedEntry:
        snapshot = self.store.snapshot()
        post = snapshot.posts.get(post_id)
        if post is None:
            raise NotFoundError("post not found")
        return FeedEntry(post=post, author=snapshot.users.get(post.author_id))

    def list_posts(self) -> List[Post]:
        return graph.newest_first(self.store.list_posts())

    def list_user_posts(self, user_id: str) -> List[Post]:
        snapshot = self.store.snapshot()
        if user_id not in snapshot.users:
            raise NotFoundError("user not found")
        return graph.posts_by(snapshot, user_id)

    def delete_post(self, post_id: str) -> None:
        with self.store.lock:
            if self.store.delete_post(post_id) is None:
                raise NotFoundError("post not found")
        logger.info("Deleted post %s and its likes", post_id)

    # --- follows ---------------------------------------------------------

    def follow(self, follower_id: str, followee_id: str) -> Follow:
        if not follower_id or not followee_id:
            raise InvalidInputError("follower_id and followee_id are required")
        if follower_id == followee_id:
            raise InvalidInputError("a user cannot follow themselves")

        with self.store.lock:
            if self.store.get_user(follower_id) is None:
                raise NotFoundError("follower user not found")
            if self.store.get_user(followee_id) is None:
                raise NotFoundError("followee user not found")
            if self.store.has_follow(follower_id, followee_id):
                logger.warning("User %s already follows %s", follower_id, followee_id)
                raise ConflictError("already following this user")
            edge = self.store.add_follow(follower_id, followee_id)
        logger.info("User %s followed %s", follower_id, followee_id)
        return edge

    def unfollow(self, follower_id: str, followee_id: str) -> None:
        if not follower_id or not followee_id:
            raise InvalidInputError("follower_id and followee_id are required")
        with self.store.lock:
            if not self.store.remove_follow(follower_id, followee_id):
                raise NotFoundError("follow relationship not found")
        logger.info("User %s unfollowed %s", follower_id, followee_id)

    # --- likes -----------------------------------------------------------

    def like(self, user_id: str, post_id: str) -> int:
        if not user_id:
            raise InvalidInputError("user_id is required")

        with self.store.lock:
            if self.store.get_post(post_id) is None:
                raise NotFoundError("post not found")
            if self.store.get_user(user_id) is None:
                raise NotFoundError("user not found")
            if self.store.has_like(user_id, post_id):
                logger.warning("User %s already liked post %s", user_id, post_id)
                raise ConflictError("post already liked by this user")
            post = self.store.add_like(user_id, post_id)
        logger.info("User %s liked post %s (likes=%d)", user_id, post_id, post.likes_count)
        return post.likes_count

    def unlike(self, user_id: str, post_id: str) -> int:
        if not user_id:
            raise InvalidInputError("user_id is required")

        with self.store.lock:
            if self.store.get_post(post_id) is None:
                raise NotFoundError("post not found")
            if not self.store.remove_like(user_id, post_id):
                raise NotFoundError("like not found")
            likes_count = self.store.get_post(post_id).likes_count
        logger.info("User %s unliked post %s (likes=%d)", user_id, post_id, likes_count)
        return likes_count

    def likers(self, post_id: str) -> List[User]:
        snapshot = self.store.snapshot()
        if post_id not in snapshot.posts:
            raise NotFoundError("post not found")
        return graph.likers_of(snapshot, post_id)

    # --- derived views ---------------------------------------------------

    def feed(self, user_id: str) -> List[FeedEntry]:
        return build_feed(self.store.snapshot(), user_id)

    def suggestions(self, user_id: str) -> List[Suggestion]:
        return suggest(self.store.snapshot(), user_id)

    def reset(self) -> None:
        self.store.reset()
        logger.info("Store reset")
