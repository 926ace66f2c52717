"""Storage port for articles.

Implementations make each write durable before returning it; a caller that
gets a result back may redirect to it straight away.
"""

from abc import ABC, abstractmethod

from pressroom.domain.entities import Article


class ArticleRepository(ABC):
    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Stored article with ``article_id``, or None."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """All articles ordered by ``created_at`` descending.

        Articles created in the same instant come out highest id first.
        """
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Insert ``article`` and return the stored copy.

        The returned copy carries the assigned id and both timestamps; the
        input's id and timestamps are ignored.
        """
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Overwrite title, author and body of the row ``article.id`` names.

        ``created_at`` is left alone and ``updated_at`` is bumped. Raises
        EntityNotFoundError when the row is gone.
        """
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Remove the row; False means there was nothing to remove."""
        ...
