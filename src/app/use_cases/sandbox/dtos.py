"""
Sandbox Use Case DTOs (Data Transfer Objects)
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from src.app.services.trace import TraceEntry
from src.domain.decision import Decision


class SandboxUserType(str, Enum):
    regular = "REGULAR"
    admin = "ADMIN"
    suspended = "SUSPENDED"


class SandboxGroupType(str, Enum):
    active = "ACTIVE"
    archive = "ARCHIVE"
    private = "PRIVATE"


class SandboxMembership(str, Enum):
    """Current membership as picked in the sandbox; NONE means no record"""

    none = "NONE"
    pending = "PENDING"
    active = "ACTIVE"
    rejected = "REJECTED"


class SandboxScenario(BaseModel):
    """Simulation input for the join rule"""

    user_type: SandboxUserType = Field(default=SandboxUserType.regular)
    group_type: SandboxGroupType = Field(default=SandboxGroupType.active)
    membership: SandboxMembership = Field(default=SandboxMembership.none)


class SandboxResponse(BaseModel):
    """Decision reached for a sandbox scenario"""

    scenario: SandboxScenario
    decision: Decision
    trace: List[TraceEntry]
