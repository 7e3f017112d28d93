from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import BaseModel
from supabase import Client

from core.config import settings
from core.errors import StorageError, handle_supabase_error
from core.logging_config import logger
from core.supabase_client import get_supabase_client
from models.capability import ActorPermissions


bearer_scheme = HTTPBearer()


# ============================================================
# Current User Model (Supabase Auth identity)
# ============================================================
class CurrentUser(BaseModel):
    id: str
    email: str
    full_name: Optional[str] = None


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired authentication token",
        headers={"WWW-Authenticate": "Bearer"},
    )


# ============================================================
# LOCAL JWT VERIFICATION (Supabase-issued HS256 tokens)
# ============================================================
def decode_supabase_jwt(token: str) -> CurrentUser:
    try:
        payload = jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    except JWTError as e:
        logger.debug(f"JWT rejected: {e}")
        raise _unauthorized()

    user_id: Optional[str] = payload.get("sub")
    email: Optional[str] = payload.get("email")
    if not user_id or not email:
        raise _unauthorized()

    metadata = payload.get("user_metadata") or {}
    return CurrentUser(id=user_id, email=email, full_name=metadata.get("full_name"))


# ============================================================
# AUTH DECODING (local secret, else Supabase GoTrue)
# ============================================================
def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> CurrentUser:

    token = credentials.credentials

    if settings.SUPABASE_JWT_SECRET:
        return decode_supabase_jwt(token)

    unauthorized = _unauthorized()

    client: Client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    # ---------------------------------------------------------
    # Validate JWT via Supabase GoTrue
    # ---------------------------------------------------------
    try:
        auth_resp = client.auth.get_user(token)
    except Exception as e:
        logger.debug(f"Token rejected by Supabase Auth: {e}")
        raise unauthorized

    if not auth_resp or not auth_resp.user or not auth_resp.user.email:
        raise unauthorized

    auth_user = auth_resp.user
    metadata = auth_user.user_metadata or {}

    return CurrentUser(
        id=auth_user.id,
        email=auth_user.email,
        full_name=metadata.get("full_name"),
    )


# ============================================================
# WORKSPACE ACTOR (role + effective permissions)
# ============================================================
def get_workspace_actor(
    workspace_id: str,
    current_user: CurrentUser = Depends(get_current_user),
) -> ActorPermissions:
    """
    Resolve the caller's permissions in the `{workspace_id}` of the route.
    Non-members get 403; storage failures are never turned into a grant.
    """
    from services.actor_permissions import resolve_actor

    try:
        actor = resolve_actor(current_user.id, workspace_id)
    except StorageError as e:
        raise handle_supabase_error(e, "Failed to resolve workspace permissions")

    if actor is None:
        raise HTTPException(
            status_code=403,
            detail="Not a member of this workspace",
        )
    return actor
