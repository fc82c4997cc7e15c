"""Users router - onboarding of new employees."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from onboarding_api.dependencies import get_user_service
from onboarding_api.exceptions import UserCreationError
from onboarding_api.middleware.error_handler import status_envelope
from onboarding_api.models.dto.user import AddUserRequest, StatusResponse
from onboarding_api.services.user_service import UserService
from onboarding_api.utils.secure_logging import log_error

logger = logging.getLogger(__name__)
router = APIRouter()

MSG_USER_CREATED = "User created successfully"
MSG_USER_NOT_CREATED = "Error while creating user"
MSG_INTERNAL_ERROR = "Internal server error"


@router.post(
    "/add_user",
    response_model=StatusResponse,
    responses={500: {"model": StatusResponse}},
)
async def add_user(
    body: AddUserRequest,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    """Create a user from the onboarding form.

    Success answers HTTP 200 with ``statusCode: 201`` in the body; clients
    rely on both values.
    """
    try:
        await service.add_user(body)
    except UserCreationError:
        logger.warning("Insert completed without creating a user")
        return status_envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            MSG_USER_NOT_CREATED,
        )
    except Exception as e:
        log_error(logger, "Error creating user", e)
        return status_envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            MSG_INTERNAL_ERROR,
        )

    return status_envelope(status.HTTP_200_OK, status.HTTP_201_CREATED, MSG_USER_CREATED)
