"""Domain entities."""

from voting_registry.domain.entities.election import Election
from voting_registry.domain.entities.proposal import Proposal
from voting_registry.domain.entities.voter import Voter


__all__ = ["Election", "Proposal", "Voter"]
