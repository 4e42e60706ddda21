"""Election event publisher implementations."""

from collections.abc import Sequence

from voting_registry.common.logging import get_logger
from voting_registry.domain.services.interfaces.event_publisher import (
    IEventPublisher,
)
from voting_registry.domain.value_objects.election_event import ElectionEvent


class StructlogEventPublisher(IEventPublisher):
    """イベントを1件ずつ構造化ログとして出力する実装."""

    def __init__(self, logger_name: str = "voting_registry.events"):
        self._logger = get_logger(logger_name)

    async def publish(self, events: Sequence[ElectionEvent]) -> None:
        for event in events:
            self._logger.info(
                "election_event", event_name=event.name, **event.to_dict()
            )


class InMemoryEventPublisher(IEventPublisher):
    """発行されたイベントをメモリ上に記録する実装."""

    def __init__(self) -> None:
        self.events: list[ElectionEvent] = []

    async def publish(self, events: Sequence[ElectionEvent]) -> None:
        self.events.extend(events)

    def clear(self) -> list[ElectionEvent]:
        """記録済みイベントを取り出して空にする."""
        events, self.events = self.events, []
        return events


class CompositeEventPublisher(IEventPublisher):
    """複数の発行先へ順番にイベントを渡す実装."""

    def __init__(self, publishers: Sequence[IEventPublisher]):
        self.publishers = list(publishers)

    async def publish(self, events: Sequence[ElectionEvent]) -> None:
        for publisher in self.publishers:
            await publisher.publish(events)
