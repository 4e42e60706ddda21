"""Election entity."""

from voting_registry.domain.entities.base import BaseEntity
from voting_registry.domain.entities.proposal import Proposal
from voting_registry.domain.entities.voter import Voter
from voting_registry.domain.exceptions import (
    AlreadyVotedError,
    ElectionValidationError,
    NotOwnerError,
    NotVoterError,
    ProposalNotFoundError,
    VoterAlreadyRegisteredError,
    WorkflowStatusMismatchError,
)
from voting_registry.domain.services.tally_domain_service import TallyDomainService
from voting_registry.domain.value_objects.election_event import (
    ElectionEvent,
    ProposalRegistered,
    Voted,
    VoterRegistered,
    WorkflowStatusChange,
)
from voting_registry.domain.value_objects.tally_result import TallyResult
from voting_registry.domain.value_objects.workflow_status import WorkflowStatus


class Election(BaseEntity):
    """1回分の選挙を表す集約ルート.

    ワークフローステータス、有権者名簿、提案一覧、当選提案を保持し、
    全ての操作の可否をここで判定する。操作は呼び出し元アドレスを受け取り、
    管理者（owner）専用か登録済み有権者専用かを最初に検証する。

    検証は全て状態変更の前に行うため、例外が送出された操作は
    何も変更しない。成功した操作が発行したイベントは ``pull_events`` で取り出す。
    """

    def __init__(
        self,
        owner: str,
        workflow_status: WorkflowStatus | None = None,
        voters: dict[str, Voter] | None = None,
        proposals: list[Proposal] | None = None,
        winning_proposal_id: int = 0,
        id: int | None = None,
    ) -> None:
        """選挙エンティティを初期化する.

        Args:
            owner: 管理者アドレス
            workflow_status: 現在のフェーズ（省略時は初期フェーズ）
            voters: アドレスをキーとする有権者名簿
            proposals: 提案一覧（インデックスが提案ID）
            winning_proposal_id: 当選提案ID（集計前は0）
            id: 選挙ID
        """
        super().__init__(id)
        if not owner:
            raise ElectionValidationError("Owner address must not be empty")
        self.owner = owner
        self.workflow_status = (
            workflow_status if workflow_status is not None else WorkflowStatus.initial()
        )
        self.voters: dict[str, Voter] = voters if voters is not None else {}
        self.proposals: list[Proposal] = proposals if proposals is not None else []
        self.winning_proposal_id = winning_proposal_id
        self._pending_events: list[ElectionEvent] = []

    def __str__(self) -> str:
        return (
            f"Election(owner={self.owner}, status={self.workflow_status.label}, "
            f"voters={len(self.voters)}, proposals={len(self.proposals)})"
        )

    @property
    def is_tallied(self) -> bool:
        """集計済みで当選提案IDが確定しているか."""
        return self.workflow_status.is_terminal

    def is_owner(self, address: str) -> bool:
        return address == self.owner

    def is_registered_voter(self, address: str) -> bool:
        voter = self.voters.get(address)
        return voter is not None and voter.is_registered

    def pull_events(self) -> list[ElectionEvent]:
        """発行済みイベントを取り出し、内部のバッファを空にする."""
        events, self._pending_events = self._pending_events, []
        return events

    # ------------------------------------------------------------------
    # 有権者名簿
    # ------------------------------------------------------------------

    def add_voter(self, caller: str, address: str) -> Voter:
        """有権者を登録する（管理者専用・有権者登録フェーズのみ）."""
        self._require_owner(caller)
        self._require_status("add_voter", WorkflowStatus.REGISTERING_VOTERS)
        if not address:
            raise ElectionValidationError("Voter address must not be empty")
        if self.is_registered_voter(address):
            raise VoterAlreadyRegisteredError(address)

        voter = Voter.registered(address)
        self.voters[address] = voter
        self._pending_events.append(VoterRegistered(voter_address=address))
        return voter

    def get_voter(self, caller: str, address: str) -> Voter:
        """有権者レコードを取得する（登録済み有権者のみ・フェーズ不問）.

        未登録のアドレスを照会した場合はデフォルトのレコードを返す。
        """
        self._require_voter(caller)
        return self.voters.get(address) or Voter.unregistered(address)

    # ------------------------------------------------------------------
    # 提案
    # ------------------------------------------------------------------

    def add_proposal(self, caller: str, description: str) -> Proposal:
        """提案を登録する（登録済み有権者のみ・提案受付中のみ）."""
        self._require_voter(caller)
        self._require_status(
            "add_proposal", WorkflowStatus.PROPOSALS_REGISTRATION_STARTED
        )
        if not description or not description.strip():
            raise ElectionValidationError("Proposal description must not be empty")

        proposal_id = len(self.proposals)
        proposal = Proposal(description=description, id=proposal_id)
        self.proposals.append(proposal)
        self._pending_events.append(ProposalRegistered(proposal_id=proposal_id))
        return proposal

    def get_one_proposal(self, caller: str, proposal_id: int) -> Proposal:
        """提案を取得する（登録済み有権者のみ・フェーズ不問）."""
        self._require_voter(caller)
        return self._find_proposal(proposal_id)

    def list_proposals(self, caller: str) -> list[Proposal]:
        """全提案をID順に取得する（登録済み有権者のみ・フェーズ不問）."""
        self._require_voter(caller)
        return list(self.proposals)

    # ------------------------------------------------------------------
    # 投票
    # ------------------------------------------------------------------

    def set_vote(self, caller: str, proposal_id: int) -> Voter:
        """提案に投票する（登録済み有権者のみ・投票期間中のみ・1人1票）."""
        self._require_voter(caller)
        self._require_status("set_vote", WorkflowStatus.VOTING_SESSION_STARTED)
        voter = self.voters[caller]
        if voter.has_voted:
            raise AlreadyVotedError(caller, voter.voted_proposal_id)
        proposal = self._find_proposal(proposal_id)

        voter.record_vote(proposal_id)
        proposal.add_vote()
        self._pending_events.append(Voted(voter=caller, proposal_id=proposal_id))
        return voter

    # ------------------------------------------------------------------
    # ワークフロー
    # ------------------------------------------------------------------

    def start_proposals_registering(self, caller: str) -> WorkflowStatusChange:
        """提案受付を開始し、GENESIS提案を作成する."""
        self._require_owner(caller)
        self._require_status(
            "start_proposals_registering", WorkflowStatus.REGISTERING_VOTERS
        )
        self.proposals.append(Proposal.genesis())
        return self._advance()

    def end_proposals_registering(self, caller: str) -> WorkflowStatusChange:
        """提案受付を終了する."""
        self._require_owner(caller)
        self._require_status(
            "end_proposals_registering",
            WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
        )
        return self._advance()

    def start_voting_session(self, caller: str) -> WorkflowStatusChange:
        """投票期間を開始する."""
        self._require_owner(caller)
        self._require_status(
            "start_voting_session", WorkflowStatus.PROPOSALS_REGISTRATION_ENDED
        )
        return self._advance()

    def end_voting_session(self, caller: str) -> WorkflowStatusChange:
        """投票期間を終了する."""
        self._require_owner(caller)
        self._require_status(
            "end_voting_session", WorkflowStatus.VOTING_SESSION_STARTED
        )
        return self._advance()

    def tally_votes(
        self, caller: str, tally_service: TallyDomainService | None = None
    ) -> TallyResult:
        """開票して当選提案を確定し、集計済みフェーズに移行する."""
        self._require_owner(caller)
        self._require_status("tally_votes", WorkflowStatus.VOTING_SESSION_ENDED)

        result = (tally_service or TallyDomainService()).tally(self.proposals)
        self.winning_proposal_id = result.winning_proposal_id
        self._advance()
        return result

    # ------------------------------------------------------------------
    # 内部ヘルパー
    # ------------------------------------------------------------------

    def _require_owner(self, caller: str) -> None:
        if not self.is_owner(caller):
            raise NotOwnerError(caller)

    def _require_voter(self, caller: str) -> None:
        if not self.is_registered_voter(caller):
            raise NotVoterError(caller)

    def _require_status(self, operation: str, expected: WorkflowStatus) -> None:
        if self.workflow_status is not expected:
            raise WorkflowStatusMismatchError(
                operation, expected=expected, actual=self.workflow_status
            )

    def _find_proposal(self, proposal_id: int) -> Proposal:
        if not 0 <= proposal_id < len(self.proposals):
            raise ProposalNotFoundError(proposal_id, len(self.proposals))
        return self.proposals[proposal_id]

    def _advance(self) -> WorkflowStatusChange:
        previous = self.workflow_status
        new_status = previous.next_status
        # 呼び出し元で現在フェーズを検証済みのため最終フェーズからは呼ばれない
        assert new_status is not None
        self.workflow_status = new_status
        event = WorkflowStatusChange(previous_status=previous, new_status=new_status)
        self._pending_events.append(event)
        return event
