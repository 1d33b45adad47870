"""Real-time push infrastructure provider."""

from dishka import Scope, provide

from qna.adapter.realtime.hub import ConnectionHub
from qna.config import RealtimeSettings
from qna.domain.service.push import PushChannel
from qna.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Connection hub provider - concrete, shared by tests and production.

    The hub holds live sessions, so exactly one instance exists per
    container. Domain services see it as a `PushChannel`; the WebSocket
    endpoint needs the full `ConnectionHub` to register sessions.
    """

    scope = Scope.APP

    @provide
    def get_connection_hub(self, settings: RealtimeSettings) -> ConnectionHub:
        """Provide the process-wide connection hub."""
        return ConnectionHub(settings=settings)

    @provide
    def get_push_channel(self, hub: ConnectionHub) -> PushChannel:
        """Expose the hub through the domain push port."""
        return hub
