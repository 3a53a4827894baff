from rest_framework import status
from rest_framework.exceptions import APIException


class LedgerError(APIException):
    """Base class for refused or failed ledger operations."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Ledger operation failed"
    default_code = "ledger_error"


class CoinNotFound(LedgerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Coin not found"
    default_code = "coin_not_found"


class InsufficientFunds(LedgerError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "Insufficient funds"
    default_code = "insufficient_funds"


class RequestNotFound(LedgerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Request not found"
    default_code = "request_not_found"


class AlreadyProcessed(LedgerError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Already processed"
    default_code = "already_processed"


class PersistenceFailure(LedgerError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Ledger storage is unavailable"
    default_code = "persistence_failure"
