"""Election repository interface."""

from abc import ABC, abstractmethod

from voting_registry.domain.entities.election import Election


class ElectionRepository(ABC):
    """Repository interface for the election held by a registry instance.

    実装は保存・取得のたびに独立したコピーを扱うこと。呼び出し元が取得した
    エンティティを変更しても、``save`` するまで保存済みの状態には反映されない。
    """

    @abstractmethod
    async def get(self) -> Election | None:
        """保存済みの選挙を取得.

        Returns:
            選挙エンティティのコピー、未作成の場合はNone
        """
        pass

    @abstractmethod
    async def save(self, election: Election) -> None:
        """選挙を保存.

        Args:
            election: 保存する選挙エンティティ
        """
        pass
