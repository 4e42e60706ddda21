"""選挙操作スクリプトのモデルと実行処理.

JSONで記述した操作列を新しいレジストリに順番に適用する。

    {
        "owner": "admin",
        "operations": [
            {"caller": "admin", "operation": "add_voter", "address": "alice"},
            {"caller": "admin", "operation": "startProposalsRegistering"},
            {"caller": "alice", "operation": "add_proposal", "description": "X"}
        ]
    }

操作名はスネークケース・キャメルケースのどちらでも指定できる。
"""

import re

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from voting_registry.application.dtos.proposal_dto import (
    AddProposalInputDto,
    GetProposalInputDto,
    ListProposalsInputDto,
)
from voting_registry.application.dtos.vote_dto import SetVoteInputDto
from voting_registry.application.dtos.voter_dto import (
    AddVoterInputDto,
    GetVoterInputDto,
)
from voting_registry.application.dtos.workflow_dto import (
    OpenElectionInputDto,
    WorkflowTransitionInputDto,
)
from voting_registry.infrastructure.di.container import Container


OperationName = Literal[
    "add_voter",
    "get_voter",
    "start_proposals_registering",
    "add_proposal",
    "get_one_proposal",
    "list_proposals",
    "end_proposals_registering",
    "start_voting_session",
    "set_vote",
    "end_voting_session",
    "tally_votes",
    "get_workflow_status",
    "get_winning_proposal_id",
    "get_owner",
]

_REQUIRED_FIELDS: dict[str, str] = {
    "add_voter": "address",
    "get_voter": "address",
    "add_proposal": "description",
    "get_one_proposal": "proposal_id",
    "set_vote": "proposal_id",
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class ScriptOperation(BaseModel):
    """スクリプト中の1操作."""

    caller: str = ""
    operation: OperationName
    address: str | None = None
    description: str | None = None
    proposal_id: int | None = Field(default=None, alias="proposalId")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("operation", mode="before")
    @classmethod
    def normalize_operation(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _CAMEL_BOUNDARY.sub("_", value).lower()
        return value

    @model_validator(mode="after")
    def check_required_fields(self) -> "ScriptOperation":
        required = _REQUIRED_FIELDS.get(self.operation)
        if required is not None and getattr(self, required) is None:
            raise ValueError(f"{self.operation} requires '{required}'")
        return self


class ElectionScript(BaseModel):
    """選挙操作スクリプト."""

    owner: str = Field(min_length=1)
    operations: list[ScriptOperation] = Field(default_factory=list)


@dataclass
class OperationOutcome:
    """1操作の実行結果."""

    operation: str
    caller: str
    success: bool
    detail: str = ""
    error_code: str | None = None
    error_message: str | None = None


async def open_election(container: Container, owner: str) -> None:
    """スクリプトの管理者で選挙を作成する.

    Raises:
        RuntimeError: 選挙を作成できなかった場合
    """
    workflow = container.use_cases.manage_workflow_usecase()
    result = await workflow.open_election(OpenElectionInputDto(owner=owner))
    if not result.success:
        raise RuntimeError(result.error_message or "Failed to open election")


async def run_operation(container: Container, op: ScriptOperation) -> OperationOutcome:
    """1操作を対応するユースケースに振り分けて実行する."""
    use_cases = container.use_cases
    caller = op.caller

    match op.operation:
        case "add_voter":
            voter_result = await use_cases.manage_voters_usecase().add_voter(
                AddVoterInputDto(caller=caller, address=op.address or "")
            )
            return _outcome(op, voter_result, f"voter {op.address} registered")
        case "get_voter":
            get_result = await use_cases.manage_voters_usecase().get_voter(
                GetVoterInputDto(caller=caller, address=op.address or "")
            )
            detail = ""
            if get_result.voter is not None:
                v = get_result.voter
                detail = (
                    f"{v.address}: registered={v.is_registered}, "
                    f"voted={v.has_voted}, proposal={v.voted_proposal_id}"
                )
            return _outcome(op, get_result, detail)
        case "add_proposal":
            add_result = await use_cases.manage_proposals_usecase().add_proposal(
                AddProposalInputDto(caller=caller, description=op.description or "")
            )
            return _outcome(op, add_result, f"proposal #{add_result.proposal_id}")
        case "get_one_proposal":
            proposal_result = (
                await use_cases.manage_proposals_usecase().get_one_proposal(
                    GetProposalInputDto(caller=caller, proposal_id=op.proposal_id or 0)
                )
            )
            detail = ""
            if proposal_result.proposal is not None:
                p = proposal_result.proposal
                detail = f"#{p.id} {p.description} ({p.vote_count} votes)"
            return _outcome(op, proposal_result, detail)
        case "list_proposals":
            list_result = await use_cases.manage_proposals_usecase().list_proposals(
                ListProposalsInputDto(caller=caller)
            )
            detail = ", ".join(
                f"#{p.id} {p.description} ({p.vote_count})"
                for p in list_result.proposals
            )
            return _outcome(op, list_result, detail)
        case "set_vote":
            vote_result = await use_cases.cast_vote_usecase().execute(
                SetVoteInputDto(caller=caller, proposal_id=op.proposal_id or 0)
            )
            return _outcome(op, vote_result, f"voted for #{op.proposal_id}")
        case (
            "start_proposals_registering"
            | "end_proposals_registering"
            | "start_voting_session"
            | "end_voting_session"
        ):
            workflow = use_cases.manage_workflow_usecase()
            transition = getattr(workflow, op.operation)
            change = await transition(WorkflowTransitionInputDto(caller=caller))
            detail = ""
            if change.success:
                detail = f"{change.previous_status} -> {change.new_status}"
            return _outcome(op, change, detail)
        case "tally_votes":
            tally = await use_cases.manage_workflow_usecase().tally_votes(
                WorkflowTransitionInputDto(caller=caller)
            )
            return _outcome(
                op,
                tally,
                f"winner #{tally.winning_proposal_id} "
                f"({tally.winning_vote_count}/{tally.total_votes} votes)",
            )
        case "get_workflow_status":
            status = await use_cases.manage_workflow_usecase().get_workflow_status()
            detail = status.status.label if status.status is not None else ""
            return _outcome(op, status, detail)
        case "get_winning_proposal_id":
            winner = await use_cases.manage_workflow_usecase().get_winning_proposal_id()
            detail = (
                f"#{winner.winning_proposal_id}" if winner.is_tallied else "not tallied"
            )
            return _outcome(op, winner, detail)
        case "get_owner":
            owner = await use_cases.manage_workflow_usecase().get_owner()
            return _outcome(op, owner, owner.owner or "")

    raise ValueError(f"Unsupported operation: {op.operation}")


def _outcome(op: ScriptOperation, result: Any, detail: str) -> OperationOutcome:
    if result.success:
        return OperationOutcome(
            operation=op.operation, caller=op.caller, success=True, detail=detail
        )
    return OperationOutcome(
        operation=op.operation,
        caller=op.caller,
        success=False,
        error_code=result.error_code,
        error_message=result.error_message,
    )
