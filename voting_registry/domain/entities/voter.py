"""Voter entity."""

DEFAULT_VOTED_PROPOSAL_ID = 0


class Voter:
    """有権者を表すエンティティ.

    アドレスで識別される。``voted_proposal_id`` は ``has_voted`` がTrueの
    場合のみ意味を持ち、それ以外は ``DEFAULT_VOTED_PROPOSAL_ID`` となる。
    """

    def __init__(
        self,
        address: str,
        is_registered: bool = False,
        has_voted: bool = False,
        voted_proposal_id: int = DEFAULT_VOTED_PROPOSAL_ID,
    ) -> None:
        """有権者エンティティを初期化する.

        Args:
            address: 有権者アドレス
            is_registered: 管理者により登録済みか
            has_voted: 投票済みか
            voted_proposal_id: 投票先の提案ID
        """
        self.address = address
        self.is_registered = is_registered
        self.has_voted = has_voted
        self.voted_proposal_id = voted_proposal_id

    @classmethod
    def registered(cls, address: str) -> "Voter":
        """登録直後の有権者を生成する."""
        return cls(address=address, is_registered=True)

    @classmethod
    def unregistered(cls, address: str) -> "Voter":
        """未登録アドレスに対するデフォルトの有権者レコードを生成する."""
        return cls(address=address)

    def record_vote(self, proposal_id: int) -> None:
        """投票済みとして記録する."""
        self.has_voted = True
        self.voted_proposal_id = proposal_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Voter):
            return NotImplemented
        return (
            self.address == other.address
            and self.is_registered == other.is_registered
            and self.has_voted == other.has_voted
            and self.voted_proposal_id == other.voted_proposal_id
        )

    def __hash__(self) -> int:
        return hash(self.address)

    def __repr__(self) -> str:
        return (
            f"Voter(address={self.address!r}, is_registered={self.is_registered}, "
            f"has_voted={self.has_voted}, voted_proposal_id={self.voted_proposal_id})"
        )
