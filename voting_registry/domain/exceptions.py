"""Domain exceptions for the voting registry.

選挙ドメインの操作拒否を表す例外群。どの例外も単一操作の拒否であり、
状態を変更しない。``error_code`` はアプリケーション層の出力DTOで
呼び出し元に返す安定した識別子。
"""

from typing import Any

from voting_registry.domain.value_objects.workflow_status import WorkflowStatus


class ElectionDomainException(Exception):
    """選挙ドメイン例外の基底クラス."""

    error_code: str = "election_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ElectionAuthorizationError(ElectionDomainException):
    """呼び出し元が必要な役割を持たない."""

    error_code = "unauthorized"


class NotOwnerError(ElectionAuthorizationError):
    """管理者専用操作が管理者以外から呼ばれた."""

    error_code = "not_owner"

    def __init__(self, caller: str):
        super().__init__("Caller is not the owner", {"caller": caller})
        self.caller = caller


class NotVoterError(ElectionAuthorizationError):
    """有権者専用操作が未登録のアドレスから呼ばれた."""

    error_code = "not_voter"

    def __init__(self, caller: str):
        super().__init__("Caller is not a registered voter", {"caller": caller})
        self.caller = caller


class WorkflowStatusMismatchError(ElectionDomainException):
    """操作が許可されていないフェーズで呼ばれた."""

    error_code = "workflow_status_mismatch"

    def __init__(
        self, operation: str, expected: WorkflowStatus, actual: WorkflowStatus
    ):
        super().__init__(
            f"{operation} requires workflow status {expected.label} "
            f"(current: {actual.label})",
            {
                "operation": operation,
                "expected": expected.label,
                "actual": actual.label,
            },
        )
        self.operation = operation
        self.expected = expected
        self.actual = actual


class ElectionValidationError(ElectionDomainException):
    """入力値が不正."""

    error_code = "validation_error"


class ProposalNotFoundError(ElectionDomainException):
    """存在しない提案IDが指定された."""

    error_code = "proposal_not_found"

    def __init__(self, proposal_id: int, proposal_count: int):
        super().__init__(
            f"Proposal not found: {proposal_id}",
            {"proposal_id": proposal_id, "proposal_count": proposal_count},
        )
        self.proposal_id = proposal_id


class VoterAlreadyRegisteredError(ElectionDomainException):
    """登録済みの有権者を再登録しようとした."""

    error_code = "voter_already_registered"

    def __init__(self, address: str):
        super().__init__(f"Voter already registered: {address}", {"address": address})
        self.address = address


class AlreadyVotedError(ElectionDomainException):
    """投票済みの有権者が再度投票しようとした."""

    error_code = "already_voted"

    def __init__(self, voter: str, voted_proposal_id: int):
        super().__init__(
            f"Voter has already voted: {voter}",
            {"voter": voter, "voted_proposal_id": voted_proposal_id},
        )
        self.voter = voter
