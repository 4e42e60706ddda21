"""提案管理に関するDTO."""

from dataclasses import dataclass, field

from voting_registry.domain.entities.proposal import Proposal


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class AddProposalInputDto:
    """提案登録の入力DTO."""

    caller: str
    description: str


@dataclass
class GetProposalInputDto:
    """提案取得の入力DTO."""

    caller: str
    proposal_id: int


@dataclass
class ListProposalsInputDto:
    """提案一覧取得の入力DTO."""

    caller: str


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class ProposalOutputItem:
    """提案の出力アイテム."""

    id: int
    description: str
    vote_count: int

    @classmethod
    def from_entity(cls, entity: Proposal) -> "ProposalOutputItem":
        """エンティティから出力アイテムを生成する."""
        return cls(
            id=entity.id or 0,
            description=entity.description,
            vote_count=entity.vote_count,
        )


@dataclass
class AddProposalOutputDto:
    """提案登録の出力DTO."""

    success: bool
    proposal_id: int | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class GetProposalOutputDto:
    """提案取得の出力DTO."""

    success: bool
    proposal: ProposalOutputItem | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class ListProposalsOutputDto:
    """提案一覧取得の出力DTO."""

    proposals: list[ProposalOutputItem] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None
