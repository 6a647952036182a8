from fastapi import APIRouter, status

from src.api.error import ServerError
from src.app.use_cases.sandbox import (
    EvaluateSandboxUseCase,
    SandboxResponse,
    SandboxScenario,
)

router = APIRouter(prefix="/sandbox", tags=["Sandbox"])


@router.post(
    "/evaluate", status_code=status.HTTP_200_OK, response_model=SandboxResponse
)
async def evaluate_sandbox(scenario: SandboxScenario):
    """
    Evaluate Sandbox Scenario

    Runs the join rule against simulated entities. A denial is a normal
    200 response with ``decision.allowed`` false; nothing is stored.
    """
    use_case = EvaluateSandboxUseCase()
    result = await use_case.execute(scenario)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
