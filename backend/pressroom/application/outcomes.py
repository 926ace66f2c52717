"""Explicit results of article use cases.

Known failures (validation, missing rows) come back as values so callers
branch on them at the call site. Infrastructure failures still raise.
"""

from dataclasses import dataclass, field

from pressroom.domain.entities import Article, ValidationMessage


@dataclass(frozen=True)
class ArticleFound:
    article: Article


@dataclass(frozen=True)
class ArticleSaved:
    article: Article


@dataclass(frozen=True)
class ArticleDeleted:
    article_id: int


@dataclass(frozen=True)
class ArticleInvalid:
    """A rejected write; ``article`` holds the attempted, unpersisted values."""

    article: Article
    errors: list[ValidationMessage] = field(default_factory=list)


@dataclass(frozen=True)
class ArticleNotFound:
    article_id: str


FindOutcome = ArticleFound | ArticleNotFound
CreateOutcome = ArticleSaved | ArticleInvalid
UpdateOutcome = ArticleSaved | ArticleInvalid | ArticleNotFound
DeleteOutcome = ArticleDeleted | ArticleNotFound
