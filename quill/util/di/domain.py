"""Domain layer DI providers."""

from dishka import Scope, provide

from quill.config import AuthSettings, CommentSettings, UploadSettings
from quill.domain.repository import (
    ImageRepository,
    NodeRepository,
    NotificationRepository,
    UserRepository,
    VoteRepository,
)
from quill.domain.service import (
    AuthService,
    CommentTreeService,
    EventPublisher,
    ImageService,
    ImageStorage,
    JWTService,
    NodeService,
    NotificationService,
    UserService,
    VoteService,
)
from quill.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(self, user_repository: UserRepository) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(user_repository=user_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        node_repository: NodeRepository,
        user_repository: UserRepository,
        publisher: EventPublisher,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            node_repository=node_repository,
            user_repository=user_repository,
            publisher=publisher,
        )

    @provide
    def get_image_service(
        self,
        image_repository: ImageRepository,
        node_repository: NodeRepository,
        storage: ImageStorage,
        upload_settings: UploadSettings,
    ) -> ImageService:
        """Provide image domain service."""
        return ImageService(
            image_repository=image_repository,
            node_repository=node_repository,
            storage=storage,
            upload_settings=upload_settings,
        )

    @provide
    def get_node_service(
        self,
        node_repository: NodeRepository,
        notification_service: NotificationService,
        image_service: ImageService,
        publisher: EventPublisher,
    ) -> NodeService:
        """Provide node domain service."""
        return NodeService(
            node_repository=node_repository,
            notification_service=notification_service,
            image_service=image_service,
            publisher=publisher,
        )

    @provide
    def get_comment_tree_service(
        self,
        node_repository: NodeRepository,
        vote_repository: VoteRepository,
        comment_settings: CommentSettings,
    ) -> CommentTreeService:
        """Provide comment tree domain service."""
        return CommentTreeService(
            node_repository=node_repository,
            vote_repository=vote_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        node_repository: NodeRepository,
        notification_service: NotificationService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            node_repository=node_repository,
            notification_service=notification_service,
        )
