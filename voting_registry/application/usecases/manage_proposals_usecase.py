"""提案管理のユースケース."""

from voting_registry.application.dtos.proposal_dto import (
    AddProposalInputDto,
    AddProposalOutputDto,
    GetProposalInputDto,
    GetProposalOutputDto,
    ListProposalsInputDto,
    ListProposalsOutputDto,
    ProposalOutputItem,
)
from voting_registry.application.exceptions import ApplicationException
from voting_registry.application.services.election_state_service import (
    ElectionStateService,
)
from voting_registry.common.logging import get_logger
from voting_registry.domain.exceptions import ElectionDomainException


logger = get_logger(__name__)


class ManageProposalsUseCase:
    """提案管理のユースケース."""

    def __init__(self, election_state_service: ElectionStateService) -> None:
        """ユースケースを初期化する.

        Args:
            election_state_service: 選挙状態サービスインスタンス
        """
        self.election_state_service = election_state_service

    async def add_proposal(
        self, input_dto: AddProposalInputDto
    ) -> AddProposalOutputDto:
        """提案を登録する."""
        try:
            proposal = await self.election_state_service.execute(
                lambda election: election.add_proposal(
                    input_dto.caller, input_dto.description
                )
            )
            logger.info(
                "Proposal registered", proposal_id=proposal.id, caller=input_dto.caller
            )
            return AddProposalOutputDto(success=True, proposal_id=proposal.id)
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning(
                "Failed to add proposal",
                caller=input_dto.caller,
                error_code=e.error_code,
                error=e.message,
            )
            return AddProposalOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )

    async def get_one_proposal(
        self, input_dto: GetProposalInputDto
    ) -> GetProposalOutputDto:
        """提案を1件取得する."""
        try:
            proposal = await self.election_state_service.read(
                lambda election: election.get_one_proposal(
                    input_dto.caller, input_dto.proposal_id
                )
            )
            return GetProposalOutputDto(
                success=True, proposal=ProposalOutputItem.from_entity(proposal)
            )
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning(
                "Failed to get proposal",
                caller=input_dto.caller,
                proposal_id=input_dto.proposal_id,
                error_code=e.error_code,
            )
            return GetProposalOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )

    async def list_proposals(
        self, input_dto: ListProposalsInputDto
    ) -> ListProposalsOutputDto:
        """全提案をID順に取得する."""
        try:
            proposals = await self.election_state_service.read(
                lambda election: election.list_proposals(input_dto.caller)
            )
            return ListProposalsOutputDto(
                proposals=[ProposalOutputItem.from_entity(p) for p in proposals]
            )
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning(
                "Failed to list proposals",
                caller=input_dto.caller,
                error_code=e.error_code,
            )
            return ListProposalsOutputDto(
                proposals=[],
                success=False,
                error_code=e.error_code,
                error_message=e.message,
            )
