from common.core.exceptions import AppException


class UnattributableTransactionError(AppException):
    """An approved transaction carries no email, so no user can be credited."""

    def __init__(self, transaction_id: str):
        super().__init__(f"Transaction {transaction_id} has no usable email")
        self.transaction_id = transaction_id
