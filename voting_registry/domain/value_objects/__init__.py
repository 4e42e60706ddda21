"""Domain value objects."""

from voting_registry.domain.value_objects.election_event import (
    ElectionEvent,
    ProposalRegistered,
    Voted,
    VoterRegistered,
    WorkflowStatusChange,
)
from voting_registry.domain.value_objects.tally_result import TallyResult
from voting_registry.domain.value_objects.workflow_status import WorkflowStatus


__all__ = [
    "ElectionEvent",
    "ProposalRegistered",
    "TallyResult",
    "Voted",
    "VoterRegistered",
    "WorkflowStatus",
    "WorkflowStatusChange",
]
