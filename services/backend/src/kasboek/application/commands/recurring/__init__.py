"""Recurring commands - pattern detection and maintenance."""

from kasboek.application.commands.recurring.deactivate_recurring_pattern_command import (  # NOQA: E501
    DeactivateRecurringPatternCommand,
)
from kasboek.application.commands.recurring.detect_recurring_patterns_command import (
    DetectRecurringPatternsCommand,
)
from kasboek.application.commands.recurring.update_recurring_pattern_command import (
    UNSET,
    UpdateRecurringPatternCommand,
)

__all__ = [
    "UNSET",
    "DeactivateRecurringPatternCommand",
    "DetectRecurringPatternsCommand",
    "UpdateRecurringPatternCommand",
]
