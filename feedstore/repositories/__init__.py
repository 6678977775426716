# feedstore/repositories package
from .base import BaseRepository
from .feed_repo import FeedRepository
from .post_repo import PostRepository

__all__ = [
    "BaseRepository",
    "FeedRepository",
    "PostRepository",
]
