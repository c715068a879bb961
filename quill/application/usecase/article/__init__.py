"""Article use cases."""

from .common import CommentTreeResponse, ImageResponse, NodeResponse
from .create_article import CreateArticleRequest, CreateArticleUseCase
from .delete_article import (
    DeleteArticleRequest,
    DeleteArticleResponse,
    DeleteArticleUseCase,
)
from .get_article import GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .get_article_tree import (
    GetArticleTreeRequest,
    GetArticleTreeUseCase,
    GetCommentRepliesRequest,
    GetCommentRepliesResponse,
    GetCommentRepliesUseCase,
)
from .list_articles import (
    ListArticlesResponse,
    ListArticlesUseCase,
    SearchArticlesRequest,
    SearchArticlesResponse,
    SearchArticlesUseCase,
)
from .update_article import UpdateArticleRequest, UpdateArticleUseCase

__all__ = [
    "CommentTreeResponse",
    "CreateArticleRequest",
    "CreateArticleUseCase",
    "DeleteArticleRequest",
    "DeleteArticleResponse",
    "DeleteArticleUseCase",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleTreeRequest",
    "GetArticleTreeUseCase",
    "GetArticleUseCase",
    "GetCommentRepliesRequest",
    "GetCommentRepliesResponse",
    "GetCommentRepliesUseCase",
    "ImageResponse",
    "ListArticlesResponse",
    "ListArticlesUseCase",
    "NodeResponse",
    "SearchArticlesRequest",
    "SearchArticlesResponse",
    "SearchArticlesUseCase",
    "UpdateArticleRequest",
    "UpdateArticleUseCase",
]
