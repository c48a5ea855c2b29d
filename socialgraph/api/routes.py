from __future__ import annotations

import datetime as dt
from typing import List

from fastapi import APIRouter, Response, status

from . import schemas
from .dependencies import Service

router = APIRouter(prefix="/api")


@router.get("/health", tags=["Health"])
def health() -> dict[str, str]:
    return {"status": "ok", "timestamp": dt.datetime.now(dt.timezone.utc).isoformat()}


# --- users -----------------------------------------------------------------


@router.post(
    "/users",
    response_model=schemas.UserResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Users"],
)
def create_user(payload: schemas.CreateUserRequest, service: Service) -> schemas.UserResponse:
    user = service.register_user(
        payload.username,
        payload.display_name,
        bio=payload.bio,
        profile_pic_url=payload.profile_pic_url,
    )
    return schemas.UserResponse.from_model(user)


@router.get("/users", response_model=List[schemas.UserResponse], tags=["Users"])
def list_users(service: Service) -> List[schemas.UserResponse]:
    return [schemas.UserResponse.from_model(user) for user in service.list_users()]


@router.get("/users/{user_id}", response_model=schemas.UserProfileResponse, tags=["Users"])
def get_user(user_id: str, service: Service) -> schemas.UserProfileResponse:
    return schemas.UserProfileResponse.from_profile(service.get_profile(user_id))


@router.get("/users/{user_id}/posts", response_model=List[schemas.PostResponse], tags=["Users"])
def list_user_posts(user_id: str, service: Service) -> List[schemas.PostResponse]:
    return [schemas.PostResponse.from_model(post) for post in service.list_user_posts(user_id)]


@router.get("/users/{user_id}/followers", response_model=List[schemas.UserResponse], tags=["Follows"])
def list_followers(user_id: str, service: Service) -> List[schemas.UserResponse]:
    return [schemas.UserResponse.from_model(user) for user in service.followers(user_id)]


@router.get("/users/{user_id}/following", response_model=List[schemas.UserResponse], tags=["Follows"])
def list_following(user_id: str, service: Service) -> List[schemas.UserResponse]:
    return [schemas.UserResponse.from_model(user) for user in service.following(user_id)]


@router.get(
    "/users/{user_id}/suggestions",
    response_model=List[schemas.SuggestionResponse],
    tags=["Suggestions"],
)
@router.get(
    "/suggestions/{user_id}",
    response_model=List[schemas.SuggestionResponse],
    tags=["Suggestions"],
)
def list_suggestions(user_id: str, service: Service) -> List[schemas.SuggestionResponse]:
    return [schemas.SuggestionResponse.from_suggestion(s) for s in service.suggestions(user_id)]


# --- posts -----------------------------------------------------------------


@router.post(
    "/posts",
    response_model=schemas.PostResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Posts"],
)
def create_post(payload: schemas.CreatePostRequest, service: Service) -> schemas.PostResponse:
    post = service.create_post(
        payload.author_id,
        payload.content,
        media_type=payload.media_type,
        media_url=payload.media_url,
    )
    return schemas.PostResponse.from_model(post)


@router.get("/posts", response_model=List[schemas.PostResponse], tags=["Posts"])
def list_posts(service: Service) -> List[schemas.PostResponse]:
    return [schemas.PostResponse.from_model(post) for post in service.list_posts()]


@router.get("/posts/{post_id}", response_model=schemas.PostWithAuthorResponse, tags=["Posts"])
def get_post(post_id: str, service: Service) -> schemas.PostWithAuthorResponse:
    return schemas.PostWithAuthorResponse.from_entry(service.get_post_with_author(post_id))


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Posts"])
def delete_post(post_id: str, service: Service) -> Response:
    service.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- likes -----------------------------------------------------------------


@router.post(
    "/posts/{post_id}/like",
    response_model=schemas.LikeResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Likes"],
)
def like_post(post_id: str, payload: schemas.LikeRequest, service: Service) -> schemas.LikeResponse:
    likes_count = service.like(payload.user_id, post_id)
    return schemas.LikeResponse(user_id=payload.user_id, post_id=post_id, likes_count=likes_count)


@router.delete("/posts/{post_id}/like", response_model=schemas.UnlikeResponse, tags=["Likes"])
def unlike_post(post_id: str, payload: schemas.LikeRequest, service: Service) -> schemas.UnlikeResponse:
    likes_count = service.unlike(payload.user_id, post_id)
    return schemas.UnlikeResponse(message="unliked successfully", likes_count=likes_count)


@router.get("/posts/{post_id}/likes", response_model=List[schemas.UserResponse], tags=["Likes"])
def list_likers(post_id: str, service: Service) -> List[schemas.UserResponse]:
    return [schemas.UserResponse.from_model(user) for user in service.likers(post_id)]


# --- follows ---------------------------------------------------------------


@router.post(
    "/follow",
    response_model=schemas.FollowResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Follows"],
)
def follow(payload: schemas.FollowRequest, service: Service) -> schemas.FollowResponse:
    edge = service.follow(payload.follower_id, payload.followee_id)
    return schemas.FollowResponse(follower_id=edge.follower_id, followee_id=edge.followee_id)


@router.delete("/follow", response_model=schemas.MessageResponse, tags=["Follows"])
def unfollow(payload: schemas.FollowRequest, service: Service) -> schemas.MessageResponse:
    service.unfollow(payload.follower_id, payload.followee_id)
    return schemas.MessageResponse(message="unfollowed successfully")


# --- feed ------------------------------------------------------------------


@router.get("/feed/{user_id}", response_model=List[schemas.PostWithAuthorResponse], tags=["Feed"])
def get_feed(user_id: str, service: Service) -> List[schemas.PostWithAuthorResponse]:
    return [schemas.PostWithAuthorResponse.from_entry(entry) for entry in service.feed(user_id)]
