"""有権者管理に関するDTO."""

from dataclasses import dataclass

from voting_registry.domain.entities.voter import Voter


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class AddVoterInputDto:
    """有権者登録の入力DTO."""

    caller: str
    address: str


@dataclass
class GetVoterInputDto:
    """有権者取得の入力DTO."""

    caller: str
    address: str


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class VoterOutputItem:
    """有権者の出力アイテム."""

    address: str
    is_registered: bool
    has_voted: bool
    voted_proposal_id: int

    @classmethod
    def from_entity(cls, entity: Voter) -> "VoterOutputItem":
        """エンティティから出力アイテムを生成する."""
        return cls(
            address=entity.address,
            is_registered=entity.is_registered,
            has_voted=entity.has_voted,
            voted_proposal_id=entity.voted_proposal_id,
        )


@dataclass
class AddVoterOutputDto:
    """有権者登録の出力DTO."""

    success: bool
    voter: VoterOutputItem | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class GetVoterOutputDto:
    """有権者取得の出力DTO."""

    success: bool
    voter: VoterOutputItem | None = None
    error_code: str | None = None
    error_message: str | None = None
