from .article import Article, ValidationMessage

__all__ = [
    "Article",
    "ValidationMessage",
]
