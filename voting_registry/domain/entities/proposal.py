"""Proposal entity module."""

from voting_registry.domain.entities.base import BaseEntity


GENESIS_PROPOSAL_ID = 0
GENESIS_DESCRIPTION = "GENESIS"


class Proposal(BaseEntity):
    """投票対象の提案を表すエンティティ.

    IDは0から始まる連番。ID 0は提案受付開始時に自動生成される
    GENESIS提案で、それ以外は通常の提案と同じく投票・当選の対象になる。
    """

    def __init__(
        self,
        description: str,
        vote_count: int = 0,
        id: int | None = None,
    ) -> None:
        super().__init__(id)
        self.description = description
        self.vote_count = vote_count

    def __str__(self) -> str:
        return f"Proposal ID:{self.id}: {self.description[:50]} ({self.vote_count} votes)"

    @classmethod
    def genesis(cls) -> "Proposal":
        """予約済みのGENESIS提案を生成する."""
        return cls(description=GENESIS_DESCRIPTION, id=GENESIS_PROPOSAL_ID)

    def add_vote(self) -> None:
        """得票数を1増やす."""
        self.vote_count += 1
