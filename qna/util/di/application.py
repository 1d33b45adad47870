"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.acceptance import (
    AcceptAnswerUseCase,
    UnacceptAnswerUseCase,
)
from qna.application.usecase.content import (
    AddCommentUseCase,
    CreateQuestionUseCase,
    DeleteAnswerUseCase,
    DeleteQuestionUseCase,
    PostAnswerUseCase,
)
from qna.application.usecase.notification import (
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    UpdateReadStateUseCase,
)
from qna.application.usecase.user import GetReputationUseCase, RegisterUserUseCase
from qna.application.usecase.vote import ApplyVoteUseCase, GetVoteStateUseCase
from qna.domain.repository import UserRepository
from qna.domain.service import (
    AcceptanceService,
    ContentService,
    NotificationService,
    UserService,
    VoteService,
)
from qna.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_apply_vote_use_case(self, vote_service: VoteService) -> ApplyVoteUseCase:
        """Provide apply vote use case."""
        return ApplyVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_state_use_case(self, vote_service: VoteService) -> GetVoteStateUseCase:
        """Provide get vote state use case."""
        return GetVoteStateUseCase(vote_service=vote_service)

    # Acceptance use cases
    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, acceptance_service: AcceptanceService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(acceptance_service=acceptance_service)

    @provide(scope=Scope.REQUEST)
    def get_unaccept_answer_use_case(
        self, acceptance_service: AcceptanceService
    ) -> UnacceptAnswerUseCase:
        """Provide unaccept answer use case."""
        return UnacceptAnswerUseCase(acceptance_service=acceptance_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self,
        notification_service: NotificationService,
        content_service: ContentService,
        user_repository: UserRepository,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service,
            content_service=content_service,
            user_repository=user_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_read_state_use_case(
        self, notification_service: NotificationService
    ) -> UpdateReadStateUseCase:
        """Provide mark read/unread use case."""
        return UpdateReadStateUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllReadUseCase:
        """Provide mark all read use case."""
        return MarkAllReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)

    # Content use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, content_service: ContentService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_post_answer_use_case(
        self, content_service: ContentService
    ) -> PostAnswerUseCase:
        """Provide post answer use case."""
        return PostAnswerUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, content_service: ContentService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self,
        content_service: ContentService,
        acceptance_service: AcceptanceService,
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            content_service=content_service, acceptance_service=acceptance_service
        )

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, content_service: ContentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(content_service=content_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_reputation_use_case(self, user_service: UserService) -> GetReputationUseCase:
        """Provide get reputation use case."""
        return GetReputationUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_service: UserService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service)
