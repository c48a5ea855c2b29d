"""Demo dataset: six users, nine posts, eight follows and five likes."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Dict, Optional

from .models import MediaType, Post, User
from .store import RelationStore

logger = logging.getLogger(__name__)

SEED_IDS: Dict[str, Dict[str, str]] = {
    "users": {
        "alice": "user-alice-0001",
        "bob": "user-bob-0002",
        "carol": "user-carol-0003",
        "dave": "user-dave-0004",
        "eve": "user-eve-0005",
        "frank": "user-frank-0006",
    },
    "posts": {f"p{n}": f"post-{n:04d}" for n in range(1, 10)},
}

_USERS = [
    ("alice", "Alice Wonderland", "Curiouser and curiouser! 🐇", 120),
    ("bob", "Bob Builder", "Can we fix it? Yes we can! 🔨", 110),
    ("carol", "Carol Danvers", "Higher, further, faster. 🚀", 100),
    ("dave", "Dave Grohl", "Music is the answer 🎸", 90),
    ("eve", "Eve Online", "Always watching the network 👁️", 80),
    ("frank", "Frank Ocean", "Blonde vibes only 🌊", 70),
]

# (post key, author, content, media type, media url, minutes ago)
_POSTS = [
    ("p1", "alice", "Just had the best cup of coffee ☕ — good morning, world!", None, None, 60),
    ("p2", "bob", "Finished building a bookshelf today. Proud of myself! 💪", None, None, 55),
    ("p3", "carol", "Flying at 30,000 feet and the view is absolutely breathtaking 🌤️", None, None, 50),
    ("p4", "dave", "Sunset jam session 🎸🌅", MediaType.IMAGE, "https://picsum.photos/seed/guitar/800/600", 45),
    ("p5", "eve", "My home lab setup — new rack arrived! 🖥️", MediaType.IMAGE, "https://picsum.photos/seed/server/800/600", 40),
    ("p6", "frank", "Ocean view from the studio 🌊", MediaType.IMAGE, "https://picsum.photos/seed/ocean/800/600", 35),
    ("p7", "alice", 'Reading "Alice in Wonderland" for the hundredth time. Still magical ✨', None, None, 30),
    ("p8", "bob", "Time-lapse of the bookshelf build 🎬", MediaType.VIDEO, "https://www.w3schools.com/html/mov_bbb.mp4", 25),
    ("p9", "carol", "Back on the ground. Next mission: the fridge 🍕", None, None, 10),
]

_FOLLOWS = [
    ("alice", "bob"),
    ("alice", "carol"),
    ("alice", "dave"),
    ("bob", "alice"),
    ("bob", "carol"),
    ("carol", "dave"),
    ("eve", "alice"),
    ("eve", "frank"),
]

_LIKES = [
    ("bob", "p1"),
    ("carol", "p1"),
    ("alice", "p4"),
    ("eve", "p4"),
    ("dave", "p9"),
]


def seed(store: RelationStore, now: Optional[dt.datetime] = None) -> bool:
    """Load the demo dataset. Returns False without writing if users already exist."""
    now = now or dt.datetime.now(dt.timezone.utc)
    user_ids = SEED_IDS["users"]
    post_ids = SEED_IDS["posts"]

    def minutes_ago(minutes: int) -> dt.datetime:
        return now - dt.timedelta(minutes=minutes)

    with store.lock:
        if store.list_users():
            logger.info("Store already populated; skipping seed.")
            return False

        for username, display_name, bio, age in _USERS:
            store.put_user(
                User(
                    id=user_ids[username],
                    username=username,
                    display_name=display_name,
                    bio=bio,
                    profile_pic_url=f"https://i.pravatar.cc/150?u={username}",
                    created_at=minutes_ago(age),
                )
            )

        for key, author, content, media_type, media_url, age in _POSTS:
            store.put_post(
                Post(
                    id=post_ids[key],
                    author_id=user_ids[author],
                    content=content,
                    media_type=media_type,
                    media_url=media_url,
                    created_at=minutes_ago(age),
                )
            )

        for follower, followee in _FOLLOWS:
            store.add_follow(user_ids[follower], user_ids[followee])

        for username, key in _LIKES:
            store.add_like(user_ids[username], post_ids[key])

    logger.info(
        "Seeded %d users, %d posts, %d follows, %d likes",
        len(_USERS),
        len(_POSTS),
        len(_FOLLOWS),
        len(_LIKES),
    )
    return True
