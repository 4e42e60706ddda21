"""選挙ワークフローステータスの値オブジェクト."""

from enum import Enum
from typing import assert_never


class WorkflowStatus(Enum):
    """選挙の進行フェーズを表す列挙型.

    値は外部連携用の整数コード（0〜5）。フェーズの前後関係は数値比較ではなく
    ``next_status`` の網羅的なmatchで定義する。
    """

    REGISTERING_VOTERS = 0
    PROPOSALS_REGISTRATION_STARTED = 1
    PROPOSALS_REGISTRATION_ENDED = 2
    VOTING_SESSION_STARTED = 3
    VOTING_SESSION_ENDED = 4
    VOTES_TALLIED = 5

    @property
    def label(self) -> str:
        """表示用のフェーズ名（例: RegisteringVoters）を返す."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def next_status(self) -> "WorkflowStatus | None":
        """次のフェーズを返す. 最終フェーズの場合はNone."""
        match self:
            case WorkflowStatus.REGISTERING_VOTERS:
                return WorkflowStatus.PROPOSALS_REGISTRATION_STARTED
            case WorkflowStatus.PROPOSALS_REGISTRATION_STARTED:
                return WorkflowStatus.PROPOSALS_REGISTRATION_ENDED
            case WorkflowStatus.PROPOSALS_REGISTRATION_ENDED:
                return WorkflowStatus.VOTING_SESSION_STARTED
            case WorkflowStatus.VOTING_SESSION_STARTED:
                return WorkflowStatus.VOTING_SESSION_ENDED
            case WorkflowStatus.VOTING_SESSION_ENDED:
                return WorkflowStatus.VOTES_TALLIED
            case WorkflowStatus.VOTES_TALLIED:
                return None
            case _:
                assert_never(self)

    @property
    def is_terminal(self) -> bool:
        """最終フェーズ（集計済み）かどうか."""
        return self.next_status is None

    @classmethod
    def initial(cls) -> "WorkflowStatus":
        """選挙開始時のフェーズを返す."""
        return cls.REGISTERING_VOTERS

    def __str__(self) -> str:
        return self.label
