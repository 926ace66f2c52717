from .article import ArticleForm

__all__ = [
    "ArticleForm",
]
