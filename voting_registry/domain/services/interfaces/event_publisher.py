"""Event publisher interface for election notifications."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from voting_registry.domain.value_objects.election_event import ElectionEvent


class IEventPublisher(ABC):
    """選挙イベントを外部の購読者へ渡すためのインターフェース.

    イベントの配送・永続化は実装側の責務。
    """

    @abstractmethod
    async def publish(self, events: Sequence[ElectionEvent]) -> None:
        """コミット済みの操作が発行したイベントを発行順に渡す.

        Args:
            events: 発行するイベントのリスト
        """
        pass
