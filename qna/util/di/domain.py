"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings, NotificationSettings, ReputationSettings
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from qna.domain.service import (
    AcceptanceService,
    ContentService,
    JWTService,
    NotificationService,
    PushChannel,
    ReputationService,
    UserService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle. JWTService is APP-scoped: it is stateless and the WebSocket
    endpoint resolves it outside any request scope.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_reputation_service(
        self, user_repository: UserRepository, settings: ReputationSettings
    ) -> ReputationService:
        """Provide reputation domain service."""
        return ReputationService(user_repository=user_repository, settings=settings)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        push_channel: PushChannel,
        settings: NotificationSettings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            push_channel=push_channel,
            settings=settings,
        )

    @provide
    def get_content_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
        notification_service: NotificationService,
        user_service: UserService,
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            comment_repository=comment_repository,
            notification_service=notification_service,
            user_service=user_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        content_service: ContentService,
        reputation_service: ReputationService,
        notification_service: NotificationService,
        push_channel: PushChannel,
        reputation_settings: ReputationSettings,
        user_service: UserService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            content_service=content_service,
            reputation_service=reputation_service,
            notification_service=notification_service,
            push_channel=push_channel,
            reputation_settings=reputation_settings,
            user_service=user_service,
        )

    @provide
    def get_acceptance_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        content_service: ContentService,
        reputation_service: ReputationService,
        notification_service: NotificationService,
        push_channel: PushChannel,
        reputation_settings: ReputationSettings,
    ) -> AcceptanceService:
        """Provide acceptance domain service."""
        return AcceptanceService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            content_service=content_service,
            reputation_service=reputation_service,
            notification_service=notification_service,
            push_channel=push_channel,
            reputation_settings=reputation_settings,
        )
