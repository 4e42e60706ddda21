"""In-memory election repository implementation."""

import copy

from voting_registry.domain.entities.election import Election
from voting_registry.domain.repositories.election_repository import (
    ElectionRepository,
)


class InMemoryElectionRepository(ElectionRepository):
    """プロセス内メモリに選挙を保持するリポジトリ実装.

    保存時・取得時にディープコピーを作るため、取得したエンティティへの変更は
    ``save`` されるまで保存済みの状態に影響しない。
    """

    def __init__(self, election: Election | None = None):
        """Initialize repository.

        Args:
            election: 初期状態として保持する選挙（任意）
        """
        self._election: Election | None = None
        if election is not None:
            self._store(election)

    async def get(self) -> Election | None:
        """保存済みの選挙のコピーを取得."""
        if self._election is None:
            return None
        return copy.deepcopy(self._election)

    async def save(self, election: Election) -> None:
        """選挙のコピーを保存."""
        self._store(election)

    def _store(self, election: Election) -> None:
        stored = copy.deepcopy(election)
        # 未取り出しのイベントは保存対象外
        stored.pull_events()
        self._election = stored
