"""選挙状態の排他制御サービス.

選挙への全ての変更操作を単一のロックの下で直列に適用する。
- 変更操作: 作業用コピーに適用 → 保存 → イベント発行（全てロック内）
- 参照操作: 保存済み状態のスナップショットに適用

操作が例外を送出した場合、作業用コピーは破棄され、保存もイベント発行も行わない。
イベント発行の失敗はログに記録するのみで、保存済みの操作結果はそのまま返す。
"""

import asyncio

from collections.abc import Callable
from typing import TypeVar

from voting_registry.application.exceptions import (
    ElectionAlreadyInitializedError,
    ElectionNotInitializedError,
)
from voting_registry.common.logging import get_logger
from voting_registry.domain.entities.election import Election
from voting_registry.domain.repositories.election_repository import (
    ElectionRepository,
)
from voting_registry.domain.services.interfaces.event_publisher import (
    IEventPublisher,
)
from voting_registry.domain.value_objects.election_event import ElectionEvent


T = TypeVar("T")

logger = get_logger(__name__)


class ElectionStateService:
    """選挙状態への変更を直列化するサービス."""

    def __init__(
        self,
        election_repository: ElectionRepository,
        event_publisher: IEventPublisher,
    ) -> None:
        """サービスを初期化する.

        Args:
            election_repository: 選挙リポジトリインスタンス
            event_publisher: イベント発行インスタンス
        """
        self.election_repository = election_repository
        self.event_publisher = event_publisher
        self._lock = asyncio.Lock()

    async def open_election(self, owner: str) -> Election:
        """管理者を指定して選挙を作成する.

        Raises:
            ElectionAlreadyInitializedError: 選挙が作成済みの場合
        """
        async with self._lock:
            existing = await self.election_repository.get()
            if existing is not None:
                raise ElectionAlreadyInitializedError(existing.owner)

            election = Election(owner=owner)
            await self.election_repository.save(election)
            logger.info("election_opened", owner=owner)
            return election

    async def execute(self, operation: Callable[[Election], T]) -> T:
        """変更操作をロック下で適用し、成功時のみ保存してイベントを発行する.

        Args:
            operation: 作業用コピーの選挙を受け取り結果を返す関数

        Returns:
            operationの戻り値

        Raises:
            ElectionNotInitializedError: 選挙が未作成の場合
            ElectionDomainException: 操作が拒否された場合（状態は変更されない）
        """
        async with self._lock:
            election = await self._load()
            result = operation(election)
            events = election.pull_events()
            await self.election_repository.save(election)
            if events:
                await self._publish(events)
            return result

    async def read(self, query: Callable[[Election], T]) -> T:
        """参照操作をスナップショットに適用する.

        Args:
            query: スナップショットの選挙を受け取り結果を返す関数

        Returns:
            queryの戻り値
        """
        election = await self._load()
        return query(election)

    async def _publish(self, events: list[ElectionEvent]) -> None:
        # 配送に失敗しても保存済みの変更は取り消さない
        try:
            await self.event_publisher.publish(events)
        except Exception:
            logger.exception(
                "event_publish_failed", event_names=[e.name for e in events]
            )

    async def _load(self) -> Election:
        election = await self.election_repository.get()
        if election is None:
            raise ElectionNotInitializedError()
        return election
