"""API V1 Router"""

from fastapi import APIRouter

from utilbill.api.v1.endpoints import bills, meters, payments, users, utilities

# Create API v1 router
api_router = APIRouter()

# Include endpoint routers with prefixes and tags
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(utilities.router, prefix="/utilities", tags=["Utilities"])
api_router.include_router(meters.router, prefix="/meters", tags=["Meters"])
api_router.include_router(bills.router, prefix="/bills", tags=["Bills"])
api_router.include_router(payments.router, prefix="/payments", tags=["Payments"])
