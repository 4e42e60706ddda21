"""選挙イベントのテスト."""

import dataclasses

import pytest

from voting_registry.domain.value_objects.election_event import (
    ProposalRegistered,
    Voted,
    VoterRegistered,
    WorkflowStatusChange,
)
from voting_registry.domain.value_objects.workflow_status import WorkflowStatus


class TestElectionEvent:
    def test_event_names(self) -> None:
        assert VoterRegistered(voter_address="0xA").name == "VoterRegistered"
        assert ProposalRegistered(proposal_id=1).name == "ProposalRegistered"
        assert Voted(voter="0xA", proposal_id=1).name == "Voted"
        assert (
            WorkflowStatusChange(
                previous_status=WorkflowStatus.REGISTERING_VOTERS,
                new_status=WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
            ).name
            == "WorkflowStatusChange"
        )

    def test_to_dict_carries_fields(self) -> None:
        """to_dictにイベントのフィールドのみが含まれること."""
        assert Voted(voter="0xA", proposal_id=2).to_dict() == {
            "voter": "0xA",
            "proposal_id": 2,
        }

    def test_to_dict_renders_statuses_as_labels(self) -> None:
        """ステータスは表示用フェーズ名に変換されること."""
        event = WorkflowStatusChange(
            previous_status=WorkflowStatus.VOTING_SESSION_ENDED,
            new_status=WorkflowStatus.VOTES_TALLIED,
        )

        assert event.to_dict() == {
            "previous_status": "VotingSessionEnded",
            "new_status": "VotesTallied",
        }

    def test_events_are_immutable(self) -> None:
        event = ProposalRegistered(proposal_id=1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            event.proposal_id = 2  # type: ignore[misc]
