"""Tests for Voter entity."""

from voting_registry.domain.entities.voter import DEFAULT_VOTED_PROPOSAL_ID, Voter


class TestVoter:
    """Test cases for Voter entity."""

    def test_initialization_defaults(self) -> None:
        """Test entity initialization with address only."""
        voter = Voter(address="0xA")

        assert voter.address == "0xA"
        assert voter.is_registered is False
        assert voter.has_voted is False
        assert voter.voted_proposal_id == DEFAULT_VOTED_PROPOSAL_ID == 0

    def test_registered_factory(self) -> None:
        voter = Voter.registered("0xA")

        assert voter.is_registered is True
        assert voter.has_voted is False
        assert voter.voted_proposal_id == 0

    def test_unregistered_factory_returns_default_record(self) -> None:
        assert Voter.unregistered("0xB") == Voter(address="0xB")

    def test_record_vote(self) -> None:
        voter = Voter.registered("0xA")

        voter.record_vote(3)

        assert voter.has_voted is True
        assert voter.voted_proposal_id == 3

    def test_equality_compares_all_fields(self) -> None:
        voted = Voter.registered("0xA")
        voted.record_vote(1)

        assert Voter.registered("0xA") == Voter.registered("0xA")
        assert voted != Voter.registered("0xA")
        assert Voter.registered("0xA") != Voter.registered("0xB")
