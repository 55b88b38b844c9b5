"""Use cases do painel administrativo."""

from app.use_cases.admin.admin_login import ADMIN_ROLE, AdminLoginUseCase
from app.use_cases.admin.whitelist_admin import WhitelistAdminUseCase

__all__ = [
    "ADMIN_ROLE",
    "AdminLoginUseCase",
    "WhitelistAdminUseCase",
]
