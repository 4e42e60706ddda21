"""選挙で発行される通知（ドメインイベント）の値オブジェクト."""

from dataclasses import asdict, dataclass
from typing import Any, ClassVar

from voting_registry.domain.value_objects.workflow_status import WorkflowStatus


@dataclass(frozen=True)
class ElectionEvent:
    """選挙イベントの基底クラス."""

    name: ClassVar[str] = "ElectionEvent"

    def to_dict(self) -> dict[str, Any]:
        """ログ出力・外部連携用の辞書に変換する."""
        payload = asdict(self)
        for key, value in payload.items():
            if isinstance(value, WorkflowStatus):
                payload[key] = value.label
        return payload


@dataclass(frozen=True)
class VoterRegistered(ElectionEvent):
    """有権者登録イベント."""

    name: ClassVar[str] = "VoterRegistered"

    voter_address: str


@dataclass(frozen=True)
class ProposalRegistered(ElectionEvent):
    """提案登録イベント."""

    name: ClassVar[str] = "ProposalRegistered"

    proposal_id: int


@dataclass(frozen=True)
class Voted(ElectionEvent):
    """投票イベント."""

    name: ClassVar[str] = "Voted"

    voter: str
    proposal_id: int


@dataclass(frozen=True)
class WorkflowStatusChange(ElectionEvent):
    """ワークフローステータス変更イベント."""

    name: ClassVar[str] = "WorkflowStatusChange"

    previous_status: WorkflowStatus
    new_status: WorkflowStatus
