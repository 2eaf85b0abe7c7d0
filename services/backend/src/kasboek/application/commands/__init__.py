"""Command layer - write operations that mutate state.

Commands represent user intentions to change system state. They
orchestrate domain services and repositories; committing is left to
the presentation layer.
"""

from kasboek.application.commands.recurring import (
    UNSET,
    DeactivateRecurringPatternCommand,
    DetectRecurringPatternsCommand,
    UpdateRecurringPatternCommand,
)

__all__ = [
    "UNSET",
    "DeactivateRecurringPatternCommand",
    "DetectRecurringPatternsCommand",
    "UpdateRecurringPatternCommand",
]
