"""有権者管理のユースケース."""

from voting_registry.application.dtos.voter_dto import (
    AddVoterInputDto,
    AddVoterOutputDto,
    GetVoterInputDto,
    GetVoterOutputDto,
    VoterOutputItem,
)
from voting_registry.application.exceptions import ApplicationException
from voting_registry.application.services.election_state_service import (
    ElectionStateService,
)
from voting_registry.common.logging import get_logger
from voting_registry.domain.exceptions import ElectionDomainException


logger = get_logger(__name__)


class ManageVotersUseCase:
    """有権者管理のユースケース."""

    def __init__(self, election_state_service: ElectionStateService) -> None:
        """ユースケースを初期化する.

        Args:
            election_state_service: 選挙状態サービスインスタンス
        """
        self.election_state_service = election_state_service

    async def add_voter(self, input_dto: AddVoterInputDto) -> AddVoterOutputDto:
        """有権者を登録する."""
        try:
            voter = await self.election_state_service.execute(
                lambda election: election.add_voter(input_dto.caller, input_dto.address)
            )
            logger.info("Voter registered", address=input_dto.address)
            return AddVoterOutputDto(
                success=True, voter=VoterOutputItem.from_entity(voter)
            )
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning(
                "Failed to add voter",
                caller=input_dto.caller,
                address=input_dto.address,
                error_code=e.error_code,
                error=e.message,
            )
            return AddVoterOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )

    async def get_voter(self, input_dto: GetVoterInputDto) -> GetVoterOutputDto:
        """有権者レコードを取得する."""
        try:
            voter = await self.election_state_service.read(
                lambda election: election.get_voter(input_dto.caller, input_dto.address)
            )
            return GetVoterOutputDto(
                success=True, voter=VoterOutputItem.from_entity(voter)
            )
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning(
                "Failed to get voter",
                caller=input_dto.caller,
                address=input_dto.address,
                error_code=e.error_code,
            )
            return GetVoterOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )
