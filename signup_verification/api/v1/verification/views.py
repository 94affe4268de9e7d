from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from loguru import logger

from signup_verification.api.v1.schemas import SendEmailRequest, VerifyCodeRequest
from signup_verification.cache.dependencies import get_code_store, get_mailer
from signup_verification.core.constants import DataKeys, SuccessMessages
from signup_verification.core.exceptions import CodeMismatch
from signup_verification.services.email_sender import ActivationMailer
from signup_verification.services.verification import (
    VerificationCodeStore,
    normalize_recipient,
)
from signup_verification.settings import settings
from signup_verification.utils.standard_response import standard_response

router = APIRouter()


async def issue_code(store: VerificationCodeStore, recipient: str) -> dict:
    """issueCode: generate and store a fresh code for ``recipient``."""
    return {DataKeys.CODE: await store.issue(recipient)}


async def verify_code(store: VerificationCodeStore, recipient: str, code: str) -> dict:
    """verifyCode: compare ``code`` with the active code of ``recipient``."""
    return {DataKeys.MATCHED: await store.verify(recipient, code)}


@router.post("/sendEmail")
async def send_email(
    request: Request,
    payload: SendEmailRequest,
    store: VerificationCodeStore = Depends(get_code_store),
    mailer: ActivationMailer = Depends(get_mailer),
) -> JSONResponse:
    """
    Issue an activation code and email it.

    The code stays valid even when dispatch fails, a later resend replaces it.
    """
    recipient = normalize_recipient(payload.to)
    issued = await issue_code(store, recipient)
    await mailer.send(recipient, issued[DataKeys.CODE])

    return standard_response(
        message=SuccessMessages.CODE_SENT,
        request=request,
        data={
            DataKeys.EMAIL: recipient,
            DataKeys.RESEND_AFTER_SECONDS: settings.resend_cooldown_seconds,
            DataKeys.EXPIRES_IN_SECONDS: store.ttl_seconds,
        },
    )


@router.post("/verifyCode")
async def verify_code_view(
    request: Request,
    payload: VerifyCodeRequest,
    store: VerificationCodeStore = Depends(get_code_store),
) -> JSONResponse:
    """Check a submitted activation code."""
    result = await verify_code(store, payload.email, payload.code)
    if not result[DataKeys.MATCHED]:
        logger.info(f"Rejected verification code for {normalize_recipient(payload.email)}")
        raise CodeMismatch()

    return standard_response(
        message=SuccessMessages.CODE_VERIFIED,
        request=request,
        data=result,
    )
