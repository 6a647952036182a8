"""
Sandbox Use Cases

Storage-free evaluation of the domain rules.
"""

from .dtos import (
    SandboxGroupType,
    SandboxMembership,
    SandboxResponse,
    SandboxScenario,
    SandboxUserType,
)
from .evaluate_sandbox_use_case import EvaluateSandboxUseCase

__all__ = [
    "EvaluateSandboxUseCase",
    "SandboxGroupType",
    "SandboxMembership",
    "SandboxResponse",
    "SandboxScenario",
    "SandboxUserType",
]
