"""投票のユースケース."""

from voting_registry.application.dtos.vote_dto import SetVoteInputDto, SetVoteOutputDto
from voting_registry.application.dtos.voter_dto import VoterOutputItem
from voting_registry.application.exceptions import ApplicationException
from voting_registry.application.services.election_state_service import (
    ElectionStateService,
)
from voting_registry.common.logging import get_logger
from voting_registry.domain.exceptions import ElectionDomainException


logger = get_logger(__name__)


class CastVoteUseCase:
    """登録済み有権者が提案に1票を投じるユースケース."""

    def __init__(self, election_state_service: ElectionStateService) -> None:
        self.election_state_service = election_state_service

    async def execute(self, input_dto: SetVoteInputDto) -> SetVoteOutputDto:
        """投票する.

        投票者フラグの更新と提案の得票数加算は同一の操作として適用され、
        拒否された場合はどちらも反映されない。
        """
        try:
            voter = await self.election_state_service.execute(
                lambda election: election.set_vote(
                    input_dto.caller, input_dto.proposal_id
                )
            )
            logger.info(
                "Vote cast", voter=input_dto.caller, proposal_id=input_dto.proposal_id
            )
            return SetVoteOutputDto(
                success=True, voter=VoterOutputItem.from_entity(voter)
            )
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning(
                "Failed to cast vote",
                caller=input_dto.caller,
                proposal_id=input_dto.proposal_id,
                error_code=e.error_code,
                error=e.message,
            )
            return SetVoteOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )
