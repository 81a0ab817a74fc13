"""Module-level configuration for ticktime defaults."""

import threading
from dataclasses import dataclass, field

from ticktime.clock import Clock, SystemClock


@dataclass
class TickTimeConfig:
    """Configuration for ticktime defaults."""

    clock: Clock = field(default_factory=SystemClock)
    check_contracts: bool = True  # False = arguments are trusted, no checks


# Module-level singleton
_ticktime_config: TickTimeConfig | None = None
_config_lock = threading.Lock()


def get_ticktime_config() -> TickTimeConfig:
    """Get the global ticktime configuration singleton."""
    global _ticktime_config
    if _ticktime_config is None:
        with _config_lock:
            if _ticktime_config is None:
                _ticktime_config = TickTimeConfig()
    return _ticktime_config


def configure_ticktime(
    clock: Clock | None = None,
    check_contracts: bool | None = None,
) -> None:
    """Configure default ticktime settings.

    Args:
        clock: Clock used by ``DateTime.now()`` and ``DateTime.utc_now()``
            when no clock is passed explicitly.
        check_contracts: Whether invalid calendar fields, months and tick
            values raise ContractViolationError. Disable only for trusted
            bulk input that has already been validated.

    Example:
        from ticktime import FixedClock, SystemTime, configure_ticktime

        configure_ticktime(
            clock=FixedClock(SystemTime(2024, 3, 4, 1, 12, 30, 0, 0)),
        )
    """
    config = get_ticktime_config()
    with _config_lock:
        if clock is not None:
            config.clock = clock
        if check_contracts is not None:
            config.check_contracts = check_contracts


def get_clock() -> Clock:
    """Get the configured clock."""
    return get_ticktime_config().clock


def contracts_enabled() -> bool:
    """Whether contract checks are currently enforced."""
    return get_ticktime_config().check_contracts


def reset_ticktime_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _ticktime_config
    with _config_lock:
        _ticktime_config = TickTimeConfig()
