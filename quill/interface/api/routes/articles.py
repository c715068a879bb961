"""Article, comment tree and vote routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from quill.application.usecase.article import (
    CommentTreeResponse,
    CreateArticleRequest,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleResponse,
    DeleteArticleUseCase,
    GetArticleRequest,
    GetArticleResponse,
    GetArticleTreeRequest,
    GetArticleTreeUseCase,
    GetArticleUseCase,
    GetCommentRepliesRequest,
    GetCommentRepliesResponse,
    GetCommentRepliesUseCase,
    ListArticlesResponse,
    ListArticlesUseCase,
    NodeResponse,
    SearchArticlesRequest,
    SearchArticlesResponse,
    SearchArticlesUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from quill.application.usecase.vote import (
    GetVotesRequest,
    GetVotesResponse,
    GetVotesUseCase,
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from quill.domain.service import JWTService
from quill.domain.value import SortField, SortOrder, VoteDirection
from quill.interface.api.security import (
    bearer_scheme,
    optional_user_id,
    require_user_id,
)

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


class CreateArticleAPIRequest(BaseModel):
    """API request for creating an article."""

    title: str = Field(min_length=3, max_length=300)
    content: str = Field(min_length=10)


class UpdateArticleAPIRequest(BaseModel):
    """API request for editing an article or comment."""

    title: str | None = Field(default=None, min_length=3, max_length=300)
    content: str | None = Field(default=None, min_length=1)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on an article or replying to a comment."""

    parent_id: UUID
    content: str = Field(min_length=1)
    title: str | None = Field(default=None, min_length=1, max_length=300)


@router.post("", response_model=NodeResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    request: CreateArticleAPIRequest,
    jwt_service: FromDishka[JWTService],
    create_article_use_case: FromDishka[CreateArticleUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> NodeResponse:
    """Create a new top-level article.

    Requires authentication.

    Args:
        request: Article title and content
        jwt_service: JWT service from DI
        create_article_use_case: Create article use case from DI
        credentials: Bearer token

    Returns:
        Created article
    """
    user_id = require_user_id(jwt_service, credentials)
    return await create_article_use_case.execute(
        CreateArticleRequest(
            title=request.title, content=request.content, author_id=user_id
        )
    )


@router.get("", response_model=ListArticlesResponse)
async def list_articles(
    list_articles_use_case: FromDishka[ListArticlesUseCase],
) -> ListArticlesResponse:
    """List top-level articles, newest first."""
    return await list_articles_use_case.execute()


@router.get("/search", response_model=SearchArticlesResponse)
async def search_articles(
    search_articles_use_case: FromDishka[SearchArticlesUseCase],
    q: str | None = Query(default=None),
    author_id: UUID | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    sort_by: SortField = Query(default=SortField.CREATED_AT),
    sort_order: SortOrder = Query(default=SortOrder.DESC),
) -> SearchArticlesResponse:
    """Search top-level articles with pagination.

    Args:
        search_articles_use_case: Search use case from DI
        q: Case-insensitive text matched against title and content
        author_id: Only articles by this author
        page: 1-based page number
        limit: Page size (1-100)
        sort_by: Column to order by
        sort_order: Ascending or descending

    Returns:
        One page of articles plus the total match count
    """
    return await search_articles_use_case.execute(
        SearchArticlesRequest(
            q=q,
            author_id=str(author_id) if author_id else None,
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )
    )


@router.get("/full/{article_id}", response_model=CommentTreeResponse)
async def get_article_tree(
    article_id: UUID,
    get_article_tree_use_case: FromDishka[GetArticleTreeUseCase],
    depth: int | None = Query(default=None),
) -> CommentTreeResponse:
    """Get a node with its comment tree loaded ``depth`` levels deep.

    Siblings are ordered by vote score, ties newest first.
    """
    return await get_article_tree_use_case.execute(
        GetArticleTreeRequest(article_id=str(article_id), depth=depth)
    )


@router.get("/comments/{comment_id}/replies", response_model=GetCommentRepliesResponse)
async def get_comment_replies(
    comment_id: UUID,
    get_comment_replies_use_case: FromDishka[GetCommentRepliesUseCase],
    depth: int | None = Query(default=None),
) -> GetCommentRepliesResponse:
    """Load more replies below a comment."""
    return await get_comment_replies_use_case.execute(
        GetCommentRepliesRequest(comment_id=str(comment_id), depth=depth)
    )


@router.post(
    "/comments", response_model=NodeResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    request: CreateCommentAPIRequest,
    jwt_service: FromDishka[JWTService],
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> NodeResponse:
    """Comment on an article or reply to a comment.

    Requires authentication. The parent's author is notified.

    Raises:
        NotFoundError: If the parent does not exist (404)
    """
    user_id = require_user_id(jwt_service, credentials)
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            parent_id=str(request.parent_id),
            content=request.content,
            title=request.title,
            author_id=user_id,
        )
    )
    logfire.info(
        "Comment created via API", comment_id=result.id, parent_id=result.parent_id
    )
    return result


@router.get("/{article_id}", response_model=GetArticleResponse)
async def get_article(
    article_id: UUID,
    jwt_service: FromDishka[JWTService],
    get_article_use_case: FromDishka[GetArticleUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetArticleResponse:
    """Get an article with its direct comments, images and votes.

    Authentication is optional; when present, ``user_vote`` reports the
    caller's vote.
    """
    user_id = optional_user_id(jwt_service, credentials)
    return await get_article_use_case.execute(
        GetArticleRequest(article_id=str(article_id), user_id=user_id)
    )


@router.patch("/{article_id}", response_model=NodeResponse)
async def update_article(
    article_id: UUID,
    request: UpdateArticleAPIRequest,
    jwt_service: FromDishka[JWTService],
    update_article_use_case: FromDishka[UpdateArticleUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> NodeResponse:
    """Edit the title or content of a node.

    Raises:
        NotAuthorizedError: If the caller is not the author (403)
    """
    user_id = require_user_id(jwt_service, credentials)
    return await update_article_use_case.execute(
        UpdateArticleRequest(
            article_id=str(article_id),
            user_id=user_id,
            title=request.title,
            content=request.content,
        )
    )


@router.delete("/{article_id}", response_model=DeleteArticleResponse)
async def delete_article(
    article_id: UUID,
    jwt_service: FromDishka[JWTService],
    delete_article_use_case: FromDishka[DeleteArticleUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteArticleResponse:
    """Delete a node and everything below it.

    Raises:
        NotAuthorizedError: If the caller is not the author (403)
    """
    user_id = require_user_id(jwt_service, credentials)
    return await delete_article_use_case.execute(
        DeleteArticleRequest(article_id=str(article_id), user_id=user_id)
    )


@router.get("/{article_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    article_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> ListCommentsResponse:
    """List the direct comments of a node, newest first."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(node_id=str(article_id))
    )


async def _toggle(
    article_id: UUID,
    direction: VoteDirection,
    jwt_service: JWTService,
    toggle_vote_use_case: ToggleVoteUseCase,
    credentials: HTTPAuthorizationCredentials | None,
) -> ToggleVoteResponse:
    user_id = require_user_id(jwt_service, credentials)
    return await toggle_vote_use_case.execute(
        ToggleVoteRequest(node_id=str(article_id), user_id=user_id, direction=direction)
    )


@router.post("/{article_id}/upvote", response_model=ToggleVoteResponse)
async def upvote(
    article_id: UUID,
    jwt_service: FromDishka[JWTService],
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ToggleVoteResponse:
    """Toggle the caller's upvote on an article or comment.

    Upvoting twice removes the vote; upvoting a downvoted node switches it.
    """
    return await _toggle(
        article_id, VoteDirection.UP, jwt_service, toggle_vote_use_case, credentials
    )


@router.post("/{article_id}/downvote", response_model=ToggleVoteResponse)
async def downvote(
    article_id: UUID,
    jwt_service: FromDishka[JWTService],
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ToggleVoteResponse:
    """Toggle the caller's downvote on an article or comment."""
    return await _toggle(
        article_id, VoteDirection.DOWN, jwt_service, toggle_vote_use_case, credentials
    )


@router.get("/{article_id}/votes", response_model=GetVotesResponse)
async def get_votes(
    article_id: UUID,
    jwt_service: FromDishka[JWTService],
    get_votes_use_case: FromDishka[GetVotesUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetVotesResponse:
    """Get vote counts for a node and, when signed in, the caller's vote."""
    user_id = optional_user_id(jwt_service, credentials)
    return await get_votes_use_case.execute(
        GetVotesRequest(node_id=str(article_id), user_id=user_id)
    )
