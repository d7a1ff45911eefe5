"""API home route."""

from fastapi import APIRouter, status

from ..models import ApiMessageData, ApiResponseBody

API_HOME_MESSAGE = "crowdsrc API"

router = APIRouter(prefix="/api", tags=["Home"])


@router.get("/", response_model=ApiResponseBody[ApiMessageData], summary="API home")
async def api_home() -> ApiResponseBody[ApiMessageData]:
    return ApiResponseBody[ApiMessageData](
        status_code=status.HTTP_200_OK,
        data=ApiMessageData(message=API_HOME_MESSAGE),
    )
