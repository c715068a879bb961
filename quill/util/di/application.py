"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.article import (
    CreateArticleUseCase,
    DeleteArticleUseCase,
    GetArticleTreeUseCase,
    GetArticleUseCase,
    GetCommentRepliesUseCase,
    ListArticlesUseCase,
    SearchArticlesUseCase,
    UpdateArticleUseCase,
)
from quill.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from quill.application.usecase.comment import CreateCommentUseCase, ListCommentsUseCase
from quill.application.usecase.image import (
    DeleteImageUseCase,
    GetImageUseCase,
    ListImagesUseCase,
    UploadImageUseCase,
)
from quill.application.usecase.notification import (
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkReadUseCase,
)
from quill.application.usecase.user import (
    ChangePasswordUseCase,
    CheckAvailabilityUseCase,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from quill.application.usecase.vote import GetVotesUseCase, ToggleVoteUseCase
from quill.domain.service import (
    AuthService,
    CommentTreeService,
    ImageService,
    JWTService,
    NodeService,
    NotificationService,
    UserService,
    VoteService,
)
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Article use cases
    @provide
    def get_create_article_use_case(
        self, node_service: NodeService, user_service: UserService
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(node_service=node_service, user_service=user_service)

    @provide
    def get_list_articles_use_case(
        self, node_service: NodeService
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(node_service=node_service)

    @provide
    def get_search_articles_use_case(
        self, node_service: NodeService
    ) -> SearchArticlesUseCase:
        """Provide search articles use case."""
        return SearchArticlesUseCase(node_service=node_service)

    @provide
    def get_get_article_use_case(
        self,
        node_service: NodeService,
        vote_service: VoteService,
        image_service: ImageService,
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(
            node_service=node_service,
            vote_service=vote_service,
            image_service=image_service,
        )

    @provide
    def get_update_article_use_case(
        self, node_service: NodeService
    ) -> UpdateArticleUseCase:
        """Provide update article use case."""
        return UpdateArticleUseCase(node_service=node_service)

    @provide
    def get_delete_article_use_case(
        self, node_service: NodeService
    ) -> DeleteArticleUseCase:
        """Provide delete article use case."""
        return DeleteArticleUseCase(node_service=node_service)

    @provide
    def get_article_tree_use_case(
        self, comment_tree_service: CommentTreeService
    ) -> GetArticleTreeUseCase:
        """Provide get article tree use case."""
        return GetArticleTreeUseCase(comment_tree_service=comment_tree_service)

    @provide
    def get_comment_replies_use_case(
        self, comment_tree_service: CommentTreeService
    ) -> GetCommentRepliesUseCase:
        """Provide get comment replies use case."""
        return GetCommentRepliesUseCase(comment_tree_service=comment_tree_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, node_service: NodeService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(node_service=node_service, user_service=user_service)

    @provide
    def get_list_comments_use_case(
        self, node_service: NodeService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(node_service=node_service)

    # Vote use cases
    @provide
    def get_toggle_vote_use_case(self, vote_service: VoteService) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service)

    @provide
    def get_get_votes_use_case(self, vote_service: VoteService) -> GetVotesUseCase:
        """Provide get votes use case."""
        return GetVotesUseCase(vote_service=vote_service)

    # User use cases
    @provide
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide
    def get_check_availability_use_case(
        self, user_service: UserService
    ) -> CheckAvailabilityUseCase:
        """Provide check availability use case."""
        return CheckAvailabilityUseCase(user_service=user_service)

    @provide
    def get_update_user_use_case(self, user_service: UserService) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service)

    @provide
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    @provide
    def get_change_password_use_case(
        self, user_service: UserService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(user_service=user_service)

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark notifications read use case."""
        return MarkReadUseCase(notification_service=notification_service)

    @provide
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)

    # Image use cases
    @provide
    def get_upload_image_use_case(
        self, image_service: ImageService
    ) -> UploadImageUseCase:
        """Provide upload image use case."""
        return UploadImageUseCase(image_service=image_service)

    @provide
    def get_list_images_use_case(self, image_service: ImageService) -> ListImagesUseCase:
        """Provide list images use case."""
        return ListImagesUseCase(image_service=image_service)

    @provide
    def get_get_image_use_case(self, image_service: ImageService) -> GetImageUseCase:
        """Provide get image use case."""
        return GetImageUseCase(image_service=image_service)

    @provide
    def get_delete_image_use_case(
        self, image_service: ImageService
    ) -> DeleteImageUseCase:
        """Provide delete image use case."""
        return DeleteImageUseCase(image_service=image_service)
