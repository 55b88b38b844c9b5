"""Router do painel admin: agrega auth, whitelist e envio manual."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.admin.auth import router as auth_router
from api.routes.admin.numbers import router as numbers_router
from api.routes.admin.send import router as send_router

router = APIRouter()

router.include_router(auth_router)
router.include_router(numbers_router)
router.include_router(send_router)
