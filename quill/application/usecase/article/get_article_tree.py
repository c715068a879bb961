"""Comment tree use cases."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.service import CommentTreeService
from quill.domain.value import NodeId

from .common import CommentTreeResponse


class GetArticleTreeRequest(BaseModel):
    """Load an article with its comment tree."""

    article_id: str
    depth: int | None = None  # Falls back to the configured default


class GetArticleTreeUseCase:
    """Use case for loading an article and its nested comments."""

    def __init__(self, comment_tree_service: CommentTreeService) -> None:
        """Initialize get article tree use case.

        Args:
            comment_tree_service: Comment tree domain service
        """
        self.comment_tree_service = comment_tree_service

    async def execute(self, request: GetArticleTreeRequest) -> CommentTreeResponse:
        """Execute tree loading flow.

        Raises:
            NotFoundError: If the article does not exist
        """
        tree = await self.comment_tree_service.load_full_article(
            NodeId(UUID(request.article_id)), request.depth
        )
        return CommentTreeResponse.from_tree(tree)


class GetCommentRepliesRequest(BaseModel):
    """Load the replies under one comment."""

    comment_id: str
    depth: int | None = None


class GetCommentRepliesResponse(BaseModel):
    """Replies under a comment."""

    comment_id: str
    depth: int  # Depth actually loaded, after clamping
    replies: list[CommentTreeResponse]


class GetCommentRepliesUseCase:
    """Use case for lazily loading deeper levels of a thread."""

    def __init__(self, comment_tree_service: CommentTreeService) -> None:
        self.comment_tree_service = comment_tree_service

    async def execute(
        self, request: GetCommentRepliesRequest
    ) -> GetCommentRepliesResponse:
        """Execute reply loading flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        replies = await self.comment_tree_service.load_replies(
            NodeId(UUID(request.comment_id)), request.depth
        )
        return GetCommentRepliesResponse(
            comment_id=request.comment_id,
            depth=self.comment_tree_service.clamp_depth(request.depth),
            replies=[CommentTreeResponse.from_tree(reply) for reply in replies],
        )
