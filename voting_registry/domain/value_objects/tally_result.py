"""集計結果の値オブジェクト."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TallyResult:
    """開票集計の結果."""

    winning_proposal_id: int
    winning_vote_count: int
    total_votes: int
    proposal_count: int
