"""開票集計ドメインサービス."""

from collections.abc import Sequence

from voting_registry.domain.entities.proposal import GENESIS_PROPOSAL_ID, Proposal
from voting_registry.domain.value_objects.tally_result import TallyResult


class TallyDomainService:
    """提案の得票数から当選提案を決定するドメインサービス.

    提案をID昇順に走査し、得票数が現在の当選候補を厳密に上回った場合のみ
    当選候補を置き換える。同数の場合は先に見つかった（IDが小さい）提案が勝つ。
    """

    def tally(self, proposals: Sequence[Proposal]) -> TallyResult:
        """提案一覧を集計する."""
        ordered = sorted(proposals, key=lambda p: p.id or GENESIS_PROPOSAL_ID)

        winning_id = GENESIS_PROPOSAL_ID
        winning_count = 0
        total = 0
        for index, proposal in enumerate(ordered):
            total += proposal.vote_count
            if index == 0 or proposal.vote_count > winning_count:
                winning_id = proposal.id or GENESIS_PROPOSAL_ID
                winning_count = proposal.vote_count

        return TallyResult(
            winning_proposal_id=winning_id,
            winning_vote_count=winning_count,
            total_votes=total,
            proposal_count=len(ordered),
        )
