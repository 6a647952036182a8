"""
Decision Model

The only output vocabulary of the domain rules.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .entities.enums import DenialCode


class Decision(BaseModel):
    """
    Result of evaluating a rule.

    ``code`` and ``reason`` are set exactly when ``allowed`` is False.
    Build instances with ``allow()`` and ``deny()``.
    """

    model_config = ConfigDict(frozen=True)

    allowed: bool
    code: Optional[DenialCode] = None
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, code: DenialCode, reason: str) -> "Decision":
        return cls(allowed=False, code=code, reason=reason)
