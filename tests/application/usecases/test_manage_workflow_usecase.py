"""ManageWorkflowUseCaseのテスト."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from voting_registry.application.dtos.workflow_dto import (
    ElectionSummaryOutputDto,
    OpenElectionInputDto,
    WorkflowTransitionInputDto,
)
from voting_registry.application.services.election_state_service import (
    ElectionStateService,
)
from voting_registry.application.usecases.manage_workflow_usecase import (
    ManageWorkflowUseCase,
)
from voting_registry.domain.value_objects.election_event import WorkflowStatusChange
from voting_registry.domain.value_objects.workflow_status import WorkflowStatus
from voting_registry.infrastructure.persistence.in_memory_election_repository import (
    InMemoryElectionRepository,
)


OWNER = "0xOwner"
ALICE = "0xAlice"
BOB = "0xBob"

AS_OWNER = WorkflowTransitionInputDto(caller=OWNER)


@pytest.fixture
def mock_event_publisher():
    return AsyncMock()


@pytest.fixture
def state_service(mock_event_publisher):
    return ElectionStateService(
        election_repository=InMemoryElectionRepository(),
        event_publisher=mock_event_publisher,
    )


@pytest.fixture
def use_case(state_service):
    return ManageWorkflowUseCase(election_state_service=state_service)


@pytest_asyncio.fixture
async def opened(use_case, state_service, mock_event_publisher):
    """選挙を作成してALICEとBOBを登録した状態."""
    await use_case.open_election(OpenElectionInputDto(owner=OWNER))

    def register(election):
        election.add_voter(OWNER, ALICE)
        election.add_voter(OWNER, BOB)

    await state_service.execute(register)
    mock_event_publisher.reset_mock()
    return use_case


class TestOpenElection:
    """open_electionメソッドのテスト."""

    @pytest.mark.asyncio
    async def test_open_election(self, use_case):
        result = await use_case.open_election(OpenElectionInputDto(owner=OWNER))

        assert result.success is True
        assert result.owner == OWNER
        status = await use_case.get_workflow_status()
        assert status.status is WorkflowStatus.REGISTERING_VOTERS

    @pytest.mark.asyncio
    async def test_open_twice(self, use_case):
        await use_case.open_election(OpenElectionInputDto(owner=OWNER))

        result = await use_case.open_election(OpenElectionInputDto(owner=ALICE))

        assert result.success is False
        assert result.error_code == "election_already_opened"


class TestTransitions:
    """フェーズ遷移メソッドのテスト."""

    @pytest.mark.asyncio
    async def test_start_proposals_registering(self, opened, mock_event_publisher):
        result = await opened.start_proposals_registering(AS_OWNER)

        assert result.success is True
        assert result.previous_status is WorkflowStatus.REGISTERING_VOTERS
        assert result.new_status is WorkflowStatus.PROPOSALS_REGISTRATION_STARTED
        mock_event_publisher.publish.assert_awaited_once_with(
            [
                WorkflowStatusChange(
                    previous_status=WorkflowStatus.REGISTERING_VOTERS,
                    new_status=WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
                )
            ]
        )

    @pytest.mark.asyncio
    async def test_transition_by_non_owner(self, opened, mock_event_publisher):
        """管理者以外の遷移はnot_ownerで失敗し、フェーズが変わらないことを確認."""
        result = await opened.start_proposals_registering(
            WorkflowTransitionInputDto(caller=ALICE)
        )

        assert result.success is False
        assert result.error_code == "not_owner"
        assert result.new_status is None
        status = await opened.get_workflow_status()
        assert status.status is WorkflowStatus.REGISTERING_VOTERS
        mock_event_publisher.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_skipping_a_phase(self, opened):
        result = await opened.start_voting_session(AS_OWNER)

        assert result.success is False
        assert result.error_code == "workflow_status_mismatch"
        assert result.error_message == (
            "start_voting_session requires workflow status "
            "ProposalsRegistrationEnded (current: RegisteringVoters)"
        )

    @pytest.mark.asyncio
    async def test_full_sequence(self, opened):
        await opened.start_proposals_registering(AS_OWNER)
        await opened.end_proposals_registering(AS_OWNER)
        await opened.start_voting_session(AS_OWNER)
        result = await opened.end_voting_session(AS_OWNER)

        assert result.success is True
        assert result.new_status is WorkflowStatus.VOTING_SESSION_ENDED


class TestTallyVotes:
    """tally_votesメソッドのテスト."""

    @pytest.mark.asyncio
    async def test_tally_votes(self, opened, state_service):
        await opened.start_proposals_registering(AS_OWNER)

        def propose_and_vote(election):
            election.add_proposal(ALICE, "Parks")
            election.add_proposal(BOB, "Roads")
            election.end_proposals_registering(OWNER)
            election.start_voting_session(OWNER)
            election.set_vote(ALICE, 2)
            election.set_vote(BOB, 2)
            election.end_voting_session(OWNER)

        await state_service.execute(propose_and_vote)

        result = await opened.tally_votes(AS_OWNER)

        assert result.success is True
        assert result.winning_proposal_id == 2
        assert result.winning_vote_count == 2
        assert result.total_votes == 2
        winner = await opened.get_winning_proposal_id()
        assert winner.winning_proposal_id == 2
        assert winner.is_tallied is True

    @pytest.mark.asyncio
    async def test_tally_before_voting_ended(self, opened):
        result = await opened.tally_votes(AS_OWNER)

        assert result.success is False
        assert result.error_code == "workflow_status_mismatch"
        winner = await opened.get_winning_proposal_id()
        assert winner.is_tallied is False


class TestQueries:
    """照会メソッドのテスト."""

    @pytest.mark.asyncio
    async def test_get_summary(self, opened):
        await opened.start_proposals_registering(AS_OWNER)

        summary = await opened.get_summary()

        assert summary == ElectionSummaryOutputDto(
            owner=OWNER,
            status=WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
            voter_count=2,
            proposal_count=1,
            votes_cast=0,
            winning_proposal_id=None,
        )

    @pytest.mark.asyncio
    async def test_get_owner(self, opened):
        result = await opened.get_owner()

        assert result.owner == OWNER

    @pytest.mark.asyncio
    async def test_get_workflow_status_before_election_opened(self, use_case):
        """選挙作成前の照会はelection_not_openedで失敗することを確認."""
        result = await use_case.get_workflow_status()

        assert result.success is False
        assert result.status is None
        assert result.error_code == "election_not_opened"
        assert result.error_message == "Election has not been opened yet"

    @pytest.mark.asyncio
    async def test_get_winning_proposal_id_before_election_opened(self, use_case):
        result = await use_case.get_winning_proposal_id()

        assert result.success is False
        assert result.winning_proposal_id is None
        assert result.is_tallied is False
        assert result.error_code == "election_not_opened"

    @pytest.mark.asyncio
    async def test_get_owner_before_election_opened(self, use_case):
        result = await use_case.get_owner()

        assert result.success is False
        assert result.owner is None
        assert result.error_code == "election_not_opened"

    @pytest.mark.asyncio
    async def test_get_summary_before_election_opened(self, use_case):
        result = await use_case.get_summary()

        assert result == ElectionSummaryOutputDto(
            success=False,
            error_code="election_not_opened",
            error_message="Election has not been opened yet",
        )
