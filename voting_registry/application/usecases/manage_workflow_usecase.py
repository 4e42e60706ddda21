"""選挙ワークフロー管理のユースケース."""

from collections.abc import Callable

from voting_registry.application.dtos.workflow_dto import (
    ElectionSummaryOutputDto,
    OpenElectionInputDto,
    OpenElectionOutputDto,
    OwnerOutputDto,
    TallyVotesOutputDto,
    WinningProposalOutputDto,
    WorkflowStatusOutputDto,
    WorkflowTransitionInputDto,
    WorkflowTransitionOutputDto,
)
from voting_registry.application.exceptions import ApplicationException
from voting_registry.application.services.election_state_service import (
    ElectionStateService,
)
from voting_registry.common.logging import get_logger
from voting_registry.domain.entities.election import Election
from voting_registry.domain.exceptions import ElectionDomainException
from voting_registry.domain.services.tally_domain_service import TallyDomainService
from voting_registry.domain.value_objects.election_event import WorkflowStatusChange


logger = get_logger(__name__)


class ManageWorkflowUseCase:
    """選挙ワークフロー管理のユースケース.

    フェーズ遷移と開票は管理者のみ実行できる。現在フェーズと当選提案の
    照会は誰でも実行できる。
    """

    def __init__(
        self,
        election_state_service: ElectionStateService,
        tally_service: TallyDomainService | None = None,
    ) -> None:
        """ユースケースを初期化する.

        Args:
            election_state_service: 選挙状態サービスインスタンス
            tally_service: 開票集計ドメインサービスインスタンス
        """
        self.election_state_service = election_state_service
        self.tally_service = tally_service or TallyDomainService()

    async def open_election(
        self, input_dto: OpenElectionInputDto
    ) -> OpenElectionOutputDto:
        """管理者を指定して選挙を作成する."""
        try:
            election = await self.election_state_service.open_election(
                input_dto.owner
            )
            return OpenElectionOutputDto(success=True, owner=election.owner)
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning(
                "Failed to open election", owner=input_dto.owner, error=e.message
            )
            return OpenElectionOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )

    async def start_proposals_registering(
        self, input_dto: WorkflowTransitionInputDto
    ) -> WorkflowTransitionOutputDto:
        """提案受付を開始する."""
        return await self._transition(
            "start_proposals_registering",
            input_dto,
            lambda election: election.start_proposals_registering(input_dto.caller),
        )

    async def end_proposals_registering(
        self, input_dto: WorkflowTransitionInputDto
    ) -> WorkflowTransitionOutputDto:
        """提案受付を終了する."""
        return await self._transition(
            "end_proposals_registering",
            input_dto,
            lambda election: election.end_proposals_registering(input_dto.caller),
        )

    async def start_voting_session(
        self, input_dto: WorkflowTransitionInputDto
    ) -> WorkflowTransitionOutputDto:
        """投票期間を開始する."""
        return await self._transition(
            "start_voting_session",
            input_dto,
            lambda election: election.start_voting_session(input_dto.caller),
        )

    async def end_voting_session(
        self, input_dto: WorkflowTransitionInputDto
    ) -> WorkflowTransitionOutputDto:
        """投票期間を終了する."""
        return await self._transition(
            "end_voting_session",
            input_dto,
            lambda election: election.end_voting_session(input_dto.caller),
        )

    async def tally_votes(
        self, input_dto: WorkflowTransitionInputDto
    ) -> TallyVotesOutputDto:
        """開票して当選提案を確定する."""
        try:
            result = await self.election_state_service.execute(
                lambda election: election.tally_votes(
                    input_dto.caller, self.tally_service
                )
            )
            logger.info(
                "Votes tallied",
                winning_proposal_id=result.winning_proposal_id,
                winning_vote_count=result.winning_vote_count,
                total_votes=result.total_votes,
            )
            return TallyVotesOutputDto(
                success=True,
                winning_proposal_id=result.winning_proposal_id,
                winning_vote_count=result.winning_vote_count,
                total_votes=result.total_votes,
            )
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning(
                "Failed to tally votes",
                caller=input_dto.caller,
                error_code=e.error_code,
                error=e.message,
            )
            return TallyVotesOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )

    async def get_workflow_status(self) -> WorkflowStatusOutputDto:
        """現在のフェーズを取得する."""
        try:
            status = await self.election_state_service.read(
                lambda election: election.workflow_status
            )
            return WorkflowStatusOutputDto(status=status)
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning("Failed to get workflow status", error=e.message)
            return WorkflowStatusOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )

    async def get_winning_proposal_id(self) -> WinningProposalOutputDto:
        """当選提案IDを取得する（集計前は意味を持たない）."""
        try:
            return await self.election_state_service.read(
                lambda election: WinningProposalOutputDto(
                    winning_proposal_id=election.winning_proposal_id,
                    is_tallied=election.is_tallied,
                )
            )
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning("Failed to get winning proposal", error=e.message)
            return WinningProposalOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )

    async def get_owner(self) -> OwnerOutputDto:
        """管理者アドレスを取得する."""
        try:
            owner = await self.election_state_service.read(
                lambda election: election.owner
            )
            return OwnerOutputDto(owner=owner)
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning("Failed to get owner", error=e.message)
            return OwnerOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )

    async def get_summary(self) -> ElectionSummaryOutputDto:
        """選挙の概要を取得する."""
        try:
            return await self.election_state_service.read(self._summarize)
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning("Failed to get election summary", error=e.message)
            return ElectionSummaryOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )

    @staticmethod
    def _summarize(election: Election) -> ElectionSummaryOutputDto:
        return ElectionSummaryOutputDto(
            owner=election.owner,
            status=election.workflow_status,
            voter_count=len(election.voters),
            proposal_count=len(election.proposals),
            votes_cast=sum(p.vote_count for p in election.proposals),
            winning_proposal_id=(
                election.winning_proposal_id if election.is_tallied else None
            ),
        )

    async def _transition(
        self,
        operation: str,
        input_dto: WorkflowTransitionInputDto,
        apply: Callable[[Election], WorkflowStatusChange],
    ) -> WorkflowTransitionOutputDto:
        try:
            change = await self.election_state_service.execute(apply)
            logger.info(
                "Workflow status changed",
                previous_status=change.previous_status.label,
                new_status=change.new_status.label,
            )
            return WorkflowTransitionOutputDto(
                success=True,
                previous_status=change.previous_status,
                new_status=change.new_status,
            )
        except (ElectionDomainException, ApplicationException) as e:
            logger.warning(
                f"Failed to {operation.replace('_', ' ')}",
                caller=input_dto.caller,
                error_code=e.error_code,
                error=e.message,
            )
            return WorkflowTransitionOutputDto(
                success=False, error_code=e.error_code, error_message=e.message
            )
