"""피드/포스트 저장소 접근 계층"""
from typing import Any, Dict, Iterable, List, Mapping, Union

import redis

from feedstore.core.config import FEEDS_KEY, POSTS_KEY
from feedstore.repositories import FeedRepository, PostRepository
from feedstore.schemas import Post
from feedstore.utils.keys import post_key


PostInput = Union[Post, Mapping[str, Any]]


class Storage:
    """
    Redis 위의 피드/포스트 저장소

    클라이언트는 생성 시 주입받고, 수명주기(생성/종료)는 호출자가 관리한다.
    해시 저장과 feeds/posts 레지스트리 등록은 항상 MULTI/EXEC 한 번으로 묶인다.
    """

    def __init__(
        self,
        client: redis.Redis,
        feeds_key: str = FEEDS_KEY,
        posts_key: str = POSTS_KEY,
    ):
        self.client = client
        self.feed_repo = FeedRepository(client, feeds_key)
        self.post_repo = PostRepository(client, posts_key)

    @staticmethod
    def _to_post(post: PostInput) -> Post:
        if isinstance(post, Post):
            return post
        # guid 검증은 키 생성에 맡긴다 (InvalidIdentityError)
        post_key(post.get("guid"))
        return Post.model_validate(post)

    # ---------- Feeds ----------
    def add_feed(self, name: str, url: str) -> str:
        """피드 추가 후 생성된 키 반환"""
        return self.feed_repo.add_feed(name, url)

    def get_feeds(self) -> List[str]:
        return self.feed_repo.get_feeds()

    def get_feed(self, feed_key: str) -> Dict[str, Any]:
        return self.feed_repo.get_feed(feed_key)

    def get_feeds_count(self) -> int:
        return self.feed_repo.count()

    def has_feed(self, feed_key: str) -> bool:
        """get_feed의 빈 dict가 '없음'인지 구분할 때 사용"""
        return self.feed_repo.exists(feed_key)

    # ---------- Posts ----------
    def add_post(self, post: PostInput) -> None:
        self.post_repo.add_post(self._to_post(post))

    def add_posts(self, posts: Iterable[PostInput], batch_size: int = 1000) -> int:
        """여러 포스트 저장. 저장된 개수 반환"""
        return self.post_repo.add_many((self._to_post(p) for p in posts), batch_size=batch_size)

    def get_posts(self, from_: int, to: int) -> List[str]:
        """
        최신순 guid 목록

        Args:
            from_: 시작 인덱스 (0부터, 포함)
            to: 끝 인덱스 (미포함). 마지막으로 원하는 인덱스 + 1
        """
        return self.post_repo.get_guids(from_, to)

    def get_posts_count(self) -> int:
        return self.post_repo.count()

    def get_post(self, guid: str) -> Dict[str, Any]:
        return self.post_repo.get_post(guid)

    def has_post(self, guid: str) -> bool:
        return self.post_repo.exists(guid)

    def ping(self) -> bool:
        """Redis 연결 확인"""
        return self.feed_repo.ping()
