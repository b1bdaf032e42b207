"""Admin session endpoint backed by the shared admin password."""

from fastapi import APIRouter, Depends

from src.shopease.api.http.deps import get_app_config
from src.shopease.core.errors import AuthenticationError
from src.shopease.core.security import authenticate_admin
from src.shopease.entities.core._base import WireModel
from src.shopease.runtime.config.config_data import ConfigData

router = APIRouter(prefix="/admin", tags=["admin"])


class AdminLogin(WireModel):
    password: str = ""


@router.post("/session")
def admin_session(
    login: AdminLogin,
    config: ConfigData = Depends(get_app_config),
) -> dict[str, bool]:
    """Check the admin password.

    There is no server-side session; clients keep the returned flag.
    """
    if not authenticate_admin(login.password, config.admin.password):
        raise AuthenticationError("Invalid admin password")
    return {"authenticated": True}
