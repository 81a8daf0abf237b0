"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Validation (malformed or partial input)
  2xxx: Contract access
  3xxx: Job payment
  4xxx: Deposit
  9xxx: System

The message strings are part of the public API contract; clients match on them.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Validation ---

class ValidationError(AppError):
    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message, 400)


class DateRangeError(ValidationError):
    def __init__(self) -> None:
        super().__init__(1001, "need both dates to make a range")


class InvalidLimitError(ValidationError):
    def __init__(self) -> None:
        super().__init__(1002, "limit must be a positive integer")


class InvalidAmountError(ValidationError):
    def __init__(self) -> None:
        super().__init__(1003, "amount must be a positive integer")


class RequestValidationFailed(ValidationError):
    def __init__(self, detail: str) -> None:
        super().__init__(1004, detail)


# --- 2xxx: Contract access ---

class ContractNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__(2001, "contract not found", 404)


# --- 3xxx: Job payment ---

class JobNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__(3001, "job not found or it has been payed already", 404)


class ClientNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__(3002, "client not found", 404)


class ContractorNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__(3003, "contractor not found", 404)


class NotContractClientError(AppError):
    def __init__(self) -> None:
        super().__init__(3004, "only the contract client can pay this job", 403)


class InsufficientFundsError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(3005, "insufficient funds", 422)
        self.required = required
        self.available = available


# --- 4xxx: Deposit ---

class DepositProfileNotFoundError(AppError):
    def __init__(self) -> None:
        super().__init__(4001, "user doesnt exist", 404)


class DepositLimitExceededError(AppError):
    def __init__(self, amount: int, ceiling: int) -> None:
        super().__init__(4002, "limit of deposit exceeded", 422)
        self.amount = amount
        self.ceiling = ceiling


# --- 9xxx: System ---

class StoreUnavailableError(AppError):
    def __init__(self) -> None:
        super().__init__(9001, "store unavailable, retry later", 503)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
