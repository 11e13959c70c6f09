from fastapi import APIRouter

from .admin import admin_router
from .customers import customer_router
from .partners import partner_router

router = APIRouter()

router.include_router(customer_router, tags=["Customers"])
router.include_router(admin_router, tags=["Admin"])
router.include_router(partner_router, tags=["Partners"])
