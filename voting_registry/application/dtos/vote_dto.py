"""投票に関するDTO."""

from dataclasses import dataclass

from voting_registry.application.dtos.voter_dto import VoterOutputItem


@dataclass
class SetVoteInputDto:
    """投票の入力DTO."""

    caller: str
    proposal_id: int


@dataclass
class SetVoteOutputDto:
    """投票の出力DTO."""

    success: bool
    voter: VoterOutputItem | None = None
    error_code: str | None = None
    error_message: str | None = None
