"""Bearer token helpers turning an authenticated request into an actor."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from catalog.core.config import get_settings
from catalog.schemas import TokenData

settings = get_settings()
security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


@dataclass(slots=True, frozen=True)
class Actor:
    id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role in settings.security.admin_roles

    @property
    def can_manage_catalog(self) -> bool:
        # mentors publish their own templates next to admins
        return self.is_admin or self.role in settings.security.manager_roles


def create_access_token(account_id: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    payload = {
        "sub": account_id,
        "role": role,
        "exp": datetime.now(timezone.utc) + (expires_delta or timedelta(days=1)),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise credentials_exception from exc

    account_id = payload.get("sub")
    role = payload.get("role")
    if not account_id or not role:
        raise credentials_exception
    return TokenData(account_id=account_id, role=role)


async def get_current_actor(credentials: HTTPAuthorizationCredentials = Depends(security)) -> Actor:
    token_data = decode_access_token(credentials.credentials)
    return Actor(id=token_data.account_id, role=token_data.role)


async def get_optional_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
) -> Optional[Actor]:
    """Actor for public reads; anonymous callers get ``None``."""
    if credentials is None:
        return None
    token_data = decode_access_token(credentials.credentials)
    return Actor(id=token_data.account_id, role=token_data.role)


async def get_catalog_manager(actor: Actor = Depends(get_current_actor)) -> Actor:
    if not actor.can_manage_catalog:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to manage templates")
    return actor


async def get_current_admin(actor: Actor = Depends(get_current_actor)) -> Actor:
    if not actor.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Administrator rights required")
    return actor
