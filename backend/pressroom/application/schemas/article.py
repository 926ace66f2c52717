"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from pydantic import BaseModel, Field

from pressroom.domain.entities import Article


class ArticleForm(BaseModel):
    """Fields submitted by the new/edit article forms.

    Every field defaults to an empty string so that a blank title reaches
    domain validation instead of failing request parsing.
    """

    title: str = Field("", examples=["Getting Started"])
    author: str = Field("", examples=["Jane Doe"])
    body: str = Field("", examples=["This is a short article."])

    model_config = {"extra": "ignore"}

    def build(self) -> Article:
        """Return an unpersisted Article holding the submitted values."""
        return Article(title=self.title, author=self.author, body=self.body)
