from fastapi.routing import APIRouter

from signup_verification.api.v1 import monitoring, register, verification

api_router = APIRouter()
api_router.include_router(
    monitoring.router,
    prefix="/internal/monitoring",
    tags=["monitoring"],
)
api_router.include_router(verification.router, tags=["Verification"])
api_router.include_router(register.router, tags=["Registration"])
