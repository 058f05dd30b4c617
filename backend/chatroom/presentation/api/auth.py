"""Login API Router - exchanges a nickname for a bearer token."""

import logging

from fastapi import APIRouter, Request, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from slowapi import Limiter
from slowapi.util import get_remote_address

from chatroom.config.settings import Config
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.presentation.dependencies.auth import create_access_token
from chatroom.presentation.schemas import ApiSuccess, LoginRequest

logger = logging.getLogger(__name__)

# Rate limiter for this router
limiter = Limiter(key_func=get_remote_address)


# ==================== RESPONSE MODELS ====================
class LoginResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    nickname: str
    access_token: str
    token_type: str = "bearer"


# ==================== ROUTERS ====================
router = APIRouter(tags=["auth"])


# ==================== ENDPOINTS ====================
@router.post(
    "/login",
    response_model=ApiSuccess[LoginResponse],
    status_code=status.HTTP_200_OK,
)
@limiter.limit(Config.LOGIN_RATE_LIMIT)
async def login(request: Request, body: LoginRequest):
    """
    Log in under a nickname.

    The returned token goes into `Authorization: Bearer <token>` for
    GET /room and POST /chat.
    """
    nickname = Nickname(body.nickname)
    logger.info("User '%s' logged in", nickname)
    return ApiSuccess[LoginResponse](
        data=LoginResponse(
            nickname=nickname.value,
            access_token=create_access_token(nickname),
        )
    )
