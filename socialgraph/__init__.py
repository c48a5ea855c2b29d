"""In-memory social graph service: users, posts, follows, likes, feed and suggestions."""

__version__ = "0.1.0"
