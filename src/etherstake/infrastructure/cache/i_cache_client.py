"""Cache client interface for sliding-window storage."""

from abc import ABC, abstractmethod


class ICacheClient(ABC):
    """Abstract cache client interface."""

    @abstractmethod
    async def connect(self) -> None:
        """Establish connection to cache server."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Close connection to cache server."""

    @abstractmethod
    async def count_since(self, key: str, min_score: float) -> int:
        """
        Drop sorted-set members scored below min_score and count the rest.

        Args:
            key: Sorted-set key
            min_score: Oldest score to keep

        Returns:
            Number of members remaining
        """

    @abstractmethod
    async def add_scored(
        self,
        key: str,
        member: str,
        score: float,
        expire_seconds: int,
    ) -> None:
        """
        Add a member to a sorted set and refresh the key's TTL.

        Args:
            key: Sorted-set key
            member: Member value
            score: Member score (typically a timestamp)
            expire_seconds: TTL for the whole set
        """

    @abstractmethod
    async def ping(self) -> bool:
        """
        Check if cache server is reachable.

        Returns:
            True if server responds
        """
