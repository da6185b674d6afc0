"""Health query surface queried by operators and by peer nodes."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, Response, status

from healthmesh.application.dtos.health_dto import HealthStateDTO
from healthmesh.application.use_cases.health_use_cases import GetHealthStateUseCase
from healthmesh.shared import HEALTH_DEPTH_HEADER, get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


def _requested_depth(request: Request) -> int:
    raw = request.headers.get(HEALTH_DEPTH_HEADER)
    try:
        return max(0, int(raw)) if raw is not None else 0
    except ValueError:
        logger.debug("health.depth_header.invalid", value=raw)
        return 0


@router.get(
    "/health",
    response_model=HealthStateDTO,
    responses={500: {"description": "The health report could not be serialized"}},
)
@inject
async def health(
    request: Request,
    get_health_state_use_case: GetHealthStateUseCase = Depends(
        Provide["get_health_state_use_case"]
    ),
) -> Response:
    """Return the nested health report of this node and its dependencies."""
    depth = _requested_depth(request)

    # pydantic.ValidationError subclasses ValueError; covers the DTO and the dump
    try:
        health_state = await get_health_state_use_case.execute(depth)
        body = health_state.model_dump_json()
    except ValueError as exc:
        logger.error("health.serialize.failure", error=str(exc), exc_info=exc)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.debug("health.query.success", status=health_state.status.value, depth=depth)
    return Response(
        content=body,
        status_code=status.HTTP_200_OK,
        media_type="application/json",
    )
