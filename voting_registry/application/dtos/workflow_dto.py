"""選挙ワークフローに関するDTO.

管理者によるフェーズ遷移・開票と、誰でも参照できる状態照会のDTOを定義する。
"""

from dataclasses import dataclass

from voting_registry.domain.value_objects.workflow_status import WorkflowStatus


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class OpenElectionInputDto:
    """選挙作成の入力DTO."""

    owner: str


@dataclass
class WorkflowTransitionInputDto:
    """フェーズ遷移・開票の入力DTO."""

    caller: str


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class OpenElectionOutputDto:
    """選挙作成の出力DTO."""

    success: bool
    owner: str | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class WorkflowTransitionOutputDto:
    """フェーズ遷移の出力DTO."""

    success: bool
    previous_status: WorkflowStatus | None = None
    new_status: WorkflowStatus | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class TallyVotesOutputDto:
    """開票の出力DTO."""

    success: bool
    winning_proposal_id: int | None = None
    winning_vote_count: int | None = None
    total_votes: int | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class WorkflowStatusOutputDto:
    """現在フェーズ照会の出力DTO."""

    status: WorkflowStatus | None = None
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class OwnerOutputDto:
    """管理者照会の出力DTO."""

    owner: str | None = None
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class WinningProposalOutputDto:
    """当選提案照会の出力DTO.

    ``is_tallied`` がFalseの間、``winning_proposal_id`` は意味を持たない。
    """

    winning_proposal_id: int | None = None
    is_tallied: bool = False
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None


@dataclass
class ElectionSummaryOutputDto:
    """選挙概要の出力DTO."""

    owner: str | None = None
    status: WorkflowStatus | None = None
    voter_count: int = 0
    proposal_count: int = 0
    votes_cast: int = 0
    winning_proposal_id: int | None = None
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None
