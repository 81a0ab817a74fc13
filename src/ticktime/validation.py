"""Contract checks for calendar arguments."""

from ticktime.config import contracts_enabled
from ticktime.logging import get_logger


class ContractViolationError(ValueError):
    """Raised when a caller passes arguments outside a documented precondition.

    This is a programming error, not a recoverable condition: validate fields
    with ``ticktime.validate`` before constructing a ``DateTime``.
    """
    pass


def check_contract(condition: bool, message: str, **context) -> None:
    """Raise ContractViolationError when ``condition`` is false.

    Skipped entirely when contract checks are disabled in the config.

    Raises:
        ContractViolationError: If checks are enabled and the condition fails.
    """
    if condition or not contracts_enabled():
        return
    get_logger(__name__).error("contract_violation", message=message, **context)
    raise ContractViolationError(message)
