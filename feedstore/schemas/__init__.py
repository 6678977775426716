# feedstore/schemas package
from .feed import Feed
from .post import Post

__all__ = [
    "Feed",
    "Post",
]
