"""Get article use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.service import ImageService, NodeService, VoteService
from quill.domain.value import NodeId, UserId, VoteDirection

from .common import ImageResponse, NodeResponse


class GetArticleRequest(BaseModel):
    """Get article request."""

    article_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetArticleResponse(NodeResponse):
    """Article with its direct comments, images and vote counts."""

    comments: list[NodeResponse]
    images: list[ImageResponse]
    upvotes: int
    downvotes: int
    vote_score: int
    user_vote: VoteDirection | None


class GetArticleUseCase:
    """Use case for retrieving one article (or comment) by ID."""

    def __init__(
        self,
        node_service: NodeService,
        vote_service: VoteService,
        image_service: ImageService,
    ) -> None:
        """Initialize get article use case.

        Args:
            node_service: Node domain service
            vote_service: Vote domain service
            image_service: Image domain service
        """
        self.node_service = node_service
        self.vote_service = vote_service
        self.image_service = image_service

    async def execute(self, request: GetArticleRequest) -> GetArticleResponse:
        """Execute get article flow.

        Raises:
            NotFoundError: If the article does not exist
        """
        node_id = NodeId(UUID(request.article_id))
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        node = await self.node_service.get_node(node_id)
        comments = await self.node_service.list_comments(node_id)
        images = await self.image_service.list_images(node_id)
        votes = await self.vote_service.get_votes(node_id, user_id)

        return GetArticleResponse(
            **NodeResponse.from_node(node).model_dump(),
            comments=[NodeResponse.from_node(comment) for comment in comments],
            images=[ImageResponse.from_image(image) for image in images],
            upvotes=votes.tally.upvotes,
            downvotes=votes.tally.downvotes,
            vote_score=votes.tally.score,
            user_vote=votes.user_vote,
        )
