"""Query abstraction consumed by the page computer, and its adapters."""

from typing import Any, Awaitable, List, Protocol, Sequence, TypeVar, Union, runtime_checkable

from redis import Redis, RedisError

from pagewise.core.exceptions import CountError, FetchError
from pagewise.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class PaginatedQuery(Protocol[T_co]):
    """
    Anything that can count a deterministically ordered collection and
    fetch a window of it.

    Either method may be a coroutine function; the page computer awaits
    the result when needed. Implementations signal failure with
    CountError and FetchError.
    """

    def count(self) -> Union[int, Awaitable[int]]: ...

    def fetch(
        self, offset: int, limit: int
    ) -> Union[Sequence[T_co], Awaitable[Sequence[T_co]]]: ...


class SequenceQuery:
    """Query over an already ordered in-memory sequence."""

    def __init__(self, items: Sequence[T]):
        self.items = items

    def count(self) -> int:
        return len(self.items)

    def fetch(self, offset: int, limit: int) -> List[T]:
        if limit < 1:
            return []
        return list(self.items[offset : offset + limit])


class RedisSortedSetQuery:
    """Query over the members of a Redis sorted set, ordered by score."""

    def __init__(self, redis_client: Redis, key: str, descending: bool = False):
        self.redis = redis_client
        self.key = key
        self.descending = descending

    def count(self) -> int:
        try:
            return int(self.redis.zcard(self.key))
        except RedisError as e:
            logger.error(f"Error counting sorted set {self.key}: {e}")
            raise CountError(
                f"Failed to count {self.key}", details={"key": self.key}
            ) from e

    def fetch(self, offset: int, limit: int) -> List[Any]:
        if limit < 1:
            return []
        try:
            if self.descending:
                return self.redis.zrevrange(self.key, offset, offset + limit - 1)
            return self.redis.zrange(self.key, offset, offset + limit - 1)
        except RedisError as e:
            logger.error(f"Error fetching {limit} items at {offset} from {self.key}: {e}")
            raise FetchError(
                f"Failed to fetch from {self.key}",
                details={"key": self.key, "offset": offset, "limit": limit},
            ) from e


class RedisListQuery:
    """Query over a Redis list in stored order."""

    def __init__(self, redis_client: Redis, key: str):
        self.redis = redis_client
        self.key = key

    def count(self) -> int:
        try:
            return int(self.redis.llen(self.key))
        except RedisError as e:
            logger.error(f"Error counting list {self.key}: {e}")
            raise CountError(
                f"Failed to count {self.key}", details={"key": self.key}
            ) from e

    def fetch(self, offset: int, limit: int) -> List[Any]:
        if limit < 1:
            return []
        try:
            return self.redis.lrange(self.key, offset, offset + limit - 1)
        except RedisError as e:
            logger.error(f"Error fetching {limit} items at {offset} from {self.key}: {e}")
            raise FetchError(
                f"Failed to fetch from {self.key}",
                details={"key": self.key, "offset": offset, "limit": limit},
            ) from e
