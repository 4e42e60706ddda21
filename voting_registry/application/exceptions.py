"""Application layer exceptions."""


class ApplicationException(Exception):
    """アプリケーション層例外の基底クラス."""

    error_code: str = "application_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ElectionNotInitializedError(ApplicationException):
    """選挙が作成される前に操作が呼ばれた."""

    error_code = "election_not_opened"

    def __init__(self) -> None:
        super().__init__("Election has not been opened yet")


class ElectionAlreadyInitializedError(ApplicationException):
    """作成済みの選挙を再度作成しようとした."""

    error_code = "election_already_opened"

    def __init__(self, owner: str):
        super().__init__(f"Election has already been opened (owner: {owner})")
        self.owner = owner
