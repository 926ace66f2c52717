"""Article CRUD pages — server-rendered forms under /articles."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from pressroom.application.outcomes import ArticleInvalid, ArticleNotFound
from pressroom.application.schemas import ArticleForm
from pressroom.application.services import ArticleService
from pressroom.config import get_settings
from pressroom.domain.entities import Article
from pressroom.infrastructure.dependencies import get_article_service
from pressroom.presentation.web.responses import NotFound, Page, Redirect, html_view

router = APIRouter(
    prefix="/articles",
    tags=["Articles"],
    default_response_class=HTMLResponse,
    include_in_schema=False,
)


def article_form(
    title: str = Form(""),
    author: str = Form(""),
    body: str = Form(""),
) -> ArticleForm:
    """Collect the submitted form fields; anything else in the body is ignored."""
    return ArticleForm(title=title, author=author, body=body)


def _detail_url(request: Request, article: Article) -> str:
    return str(request.url_for("show_article", article_id=str(article.id)))


@router.get("", name="list_articles")
@html_view
async def list_articles(
    request: Request,
    service: ArticleService = Depends(get_article_service),
):
    """All articles, newest first."""
    articles = await service.list_articles()
    return Page(
        "articles/index.html",
        {"articles": articles, "title": get_settings().listing_title},
    )


@router.get("/new", name="new_article")
@html_view
async def new_article(request: Request):
    """Blank creation form."""
    return Page("articles/new.html", {"article": Article(title=""), "title": "New Article"})


@router.post("", name="create_article")
@html_view
async def create_article(
    request: Request,
    form: ArticleForm = Depends(article_form),
    service: ArticleService = Depends(get_article_service),
):
    outcome = await service.create_article(form)
    if isinstance(outcome, ArticleInvalid):
        return Page(
            "articles/new.html",
            {"article": outcome.article, "errors": outcome.errors, "title": "New Article"},
        )
    return Redirect(_detail_url(request, outcome.article))


@router.get("/{article_id}/edit", name="edit_article")
@html_view
async def edit_article(
    request: Request,
    article_id: str,
    service: ArticleService = Depends(get_article_service),
):
    outcome = await service.find_article(article_id)
    if isinstance(outcome, ArticleNotFound):
        return NotFound()
    return Page("articles/edit.html", {"article": outcome.article, "title": "Edit Article"})


@router.get("/{article_id}", name="show_article")
@html_view
async def show_article(
    request: Request,
    article_id: str,
    service: ArticleService = Depends(get_article_service),
):
    outcome = await service.find_article(article_id)
    if isinstance(outcome, ArticleNotFound):
        return NotFound()
    return Page("articles/show.html", {"article": outcome.article, "title": outcome.article.title})


@router.post("/{article_id}/edit", name="update_article")
@html_view
async def update_article(
    request: Request,
    article_id: str,
    form: ArticleForm = Depends(article_form),
    service: ArticleService = Depends(get_article_service),
):
    outcome = await service.update_article(article_id, form)
    if isinstance(outcome, ArticleNotFound):
        return NotFound()
    if isinstance(outcome, ArticleInvalid):
        return Page(
            "articles/edit.html",
            {"article": outcome.article, "errors": outcome.errors, "title": "Edit Article"},
        )
    return Redirect(_detail_url(request, outcome.article))


@router.get("/{article_id}/delete", name="confirm_delete_article")
@html_view
async def confirm_delete_article(
    request: Request,
    article_id: str,
    service: ArticleService = Depends(get_article_service),
):
    outcome = await service.find_article(article_id)
    if isinstance(outcome, ArticleNotFound):
        return NotFound()
    return Page("articles/delete.html", {"article": outcome.article, "title": "Delete Article"})


@router.post("/{article_id}/delete", name="delete_article")
@html_view
async def delete_article(
    request: Request,
    article_id: str,
    service: ArticleService = Depends(get_article_service),
):
    outcome = await service.delete_article(article_id)
    if isinstance(outcome, ArticleNotFound):
        return NotFound()
    return Redirect(str(request.url_for("list_articles")))
