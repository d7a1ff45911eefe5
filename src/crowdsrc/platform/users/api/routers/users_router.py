"""User router.

Decodes the request into domain values, calls the service and renders the
outcome in the response envelope.
"""

from fastapi import APIRouter, Depends, status

from .....core.exceptions import ValidationError
from ...core.exceptions import CreateUserError
from ...core.protocols import CrowdSrcService
from ..dependencies import get_crowdsrc_service
from ..errors import ApiError
from ..models import (
    ApiErrorData,
    ApiResponseBody,
    CreateUserHttpRequestBody,
    CreateUserResponseData,
)


router = APIRouter(
    prefix="/api",
    tags=["Users"],
    responses={
        422: {"model": ApiResponseBody[ApiErrorData], "description": "Invalid or duplicate user"},
        500: {"model": ApiResponseBody[ApiErrorData], "description": "Internal server error"},
    },
)


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponseBody[CreateUserResponseData],
    summary="Create user",
    description="Register a user with a unique username and email address",
)
async def create_user(
    body: CreateUserHttpRequestBody,
    service: CrowdSrcService = Depends(get_crowdsrc_service),
) -> ApiResponseBody[CreateUserResponseData]:
    """Create a user."""
    try:
        request = body.to_domain()
    except ValidationError as e:
        raise ApiError.from_parse_error(e) from e
    
    try:
        user = await service.create_user(request)
    except CreateUserError as e:
        raise ApiError.from_create_user_error(e) from e
    
    return ApiResponseBody[CreateUserResponseData](
        status_code=status.HTTP_201_CREATED,
        data=CreateUserResponseData.from_domain(user),
    )
