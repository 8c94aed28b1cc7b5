"""Verification 命令模块"""

from application.commands.verification.start_verification import (
    StartVerificationCommand,
    StartVerificationHandler,
)

__all__ = [
    "StartVerificationCommand",
    "StartVerificationHandler",
]
