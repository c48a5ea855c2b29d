from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, constr, field_validator

from ..core.models import FeedEntry, MediaType, Post, Suggestion, User, UserProfile

NonEmpty = constr(strip_whitespace=True, min_length=1)


# --- requests --------------------------------------------------------------


class CreateUserRequest(BaseModel):
    username: NonEmpty
    display_name: NonEmpty
    bio: Optional[str] = None
    profile_pic_url: Optional[str] = None


class CreatePostRequest(BaseModel):
    author_id: NonEmpty
    content: NonEmpty
    media_type: Optional[MediaType] = None
    media_url: Optional[str] = None

    @field_validator("media_type", mode="before")
    @classmethod
    def _none_means_no_media(cls, value):
        return None if value == "none" else value


class FollowRequest(BaseModel):
    follower_id: NonEmpty
    followee_id: NonEmpty


class LikeRequest(BaseModel):
    user_id: NonEmpty


# --- responses -------------------------------------------------------------


class UserResponse(BaseModel):
    id: str
    username: str
    display_name: str
    bio: str
    profile_pic_url: Optional[str]
    created_at: str

    @classmethod
    def from_model(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            display_name=user.display_name,
            bio=user.bio,
            profile_pic_url=user.profile_pic_url,
            created_at=user.created_at.isoformat(),
        )


class UserProfileResponse(UserResponse):
    follower_count: int
    following_count: int
    post_count: int

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserProfileResponse":
        return cls(
            **UserResponse.from_model(profile.user).model_dump(),
            follower_count=profile.follower_count,
            following_count=profile.following_count,
            post_count=profile.post_count,
        )


class SuggestionResponse(UserResponse):
    mutual_count: int

    @classmethod
    def from_suggestion(cls, suggestion: Suggestion) -> "SuggestionResponse":
        return cls(
            **UserResponse.from_model(suggestion.user).model_dump(),
            mutual_count=suggestion.mutual_count,
        )


class PostResponse(BaseModel):
    id: str
    author_id: str
    content: str
    media_type: Optional[MediaType]
    media_url: Optional[str]
    created_at: str
    likes_count: int

    @classmethod
    def from_model(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            author_id=post.author_id,
            content=post.content,
            media_type=post.media_type,
            media_url=post.media_url,
            created_at=post.created_at.isoformat(),
            likes_count=post.likes_count,
        )


class PostWithAuthorResponse(PostResponse):
    author: Optional[UserResponse]

    @classmethod
    def from_entry(cls, entry: FeedEntry) -> "PostWithAuthorResponse":
        author = UserResponse.from_model(entry.author) if entry.author is not None else None
        return cls(**PostResponse.from_model(entry.post).model_dump(), author=author)


class FollowResponse(BaseModel):
    follower_id: str
    followee_id: str


class LikeResponse(BaseModel):
    user_id: str
    post_id: str
    likes_count: int


class UnlikeResponse(BaseModel):
    message: str
    likes_count: int


class MessageResponse(BaseModel):
    message: str
