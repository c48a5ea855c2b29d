from __future__ import annotations

import datetime as dt
import enum
from dataclasses import dataclass
from typing import Optional


class MediaType(str, enum.Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True)
class User:
    id: str
    username: str
    display_name: str
    created_at: dt.datetime
    bio: str = ""
    profile_pic_url: Optional[str] = None


@dataclass(frozen=True)
class Post:
    id: str
    author_id: str
    content: str
    created_at: dt.datetime
    media_type: Optional[MediaType] = None
    media_url: Optional[str] = None
    likes_count: int = 0


@dataclass(frozen=True)
class Follow:
    follower_id: str
    followee_id: str


@dataclass(frozen=True)
class Like:
    user_id: str
    post_id: str


# Read-side projections built by the graph, feed and suggestion modules.


@dataclass(frozen=True)
class UserProfile:
    user: User
    follower_count: int
    following_count: int
    post_count: int


@dataclass(frozen=True)
class FeedEntry:
    post: Post
    author: Optional[User]


@dataclass(frozen=True)
class Suggestion:
    user: User
    mutual_count: int
