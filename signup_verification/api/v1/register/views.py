from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from signup_verification.api.v1.schemas import RegisterRequest
from signup_verification.cache.dependencies import get_user_registry
from signup_verification.core.constants import SuccessMessages
from signup_verification.services.users import UserRegistry
from signup_verification.utils.standard_response import standard_response

router = APIRouter()


@router.post("/register")
async def register(
    request: Request,
    payload: RegisterRequest,
    registry: UserRegistry = Depends(get_user_registry),
) -> JSONResponse:
    """Sign Up - final step, store the collected account and profile data."""
    user = await registry.register(
        email_or_phone=payload.email_or_phone,
        password=payload.password,
        username=payload.username,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone_number=payload.phone_number,
        birthdate=payload.birthdate,
        profile_picture=payload.profile_picture,
    )

    return standard_response(
        message=SuccessMessages.USER_REGISTERED,
        request=request,
        data=user.public_view(),
    )
