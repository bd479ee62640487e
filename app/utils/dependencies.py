"""
FastAPI Dependencies
Authentication, pagination and dispatcher dependencies
"""

from typing import Any, Dict, Optional

import jwt
import structlog
from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from app.config import Settings
from app.models.common import PaginationSearchQueryParams
from app.services.dispatcher import ForwardingDispatcher

logger = structlog.get_logger(__name__)

# Security scheme for JWT tokens; missing tokens are reported as 401 below
security = HTTPBearer(auto_error=False)

# Claim names used by ASP.NET-issued tokens alongside the registered ones
_ID_CLAIMS = (
    "sub",
    "nameid",
    "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/nameidentifier",
)
_ROLE_CLAIMS = (
    "role",
    "http://schemas.microsoft.com/ws/2008/06/identity/claims/role",
)


class CurrentUser(BaseModel):
    """Caller identity decoded from the bearer token"""
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    claims: Dict[str, Any] = {}


def _first_claim(claims: Dict[str, Any], names) -> Optional[str]:
    for name in names:
        value = claims.get(name)
        if value is not None:
            return str(value)
    return None


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with"""
    return request.app.state.settings


def decode_access_token(token: str, settings: Settings) -> Optional[Dict[str, Any]]:
    """
    Verify and decode a JWT access token

    Args:
        token: JWT token string
        settings: Application settings (secret, algorithm, issuer, audience)

    Returns:
        Decoded claims or None if invalid
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"verify_aud": settings.jwt_audience is not None},
        )
    except jwt.ExpiredSignatureError:
        logger.warning("Token has expired")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning("Invalid token", error=str(e))
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings)
) -> CurrentUser:
    """
    Get the authenticated caller from the bearer token

    Raises:
        HTTPException: 401 if the token is missing, expired or invalid
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = decode_access_token(credentials.credentials, settings)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return CurrentUser(
        id=_first_claim(claims, _ID_CLAIMS),
        email=claims.get("email"),
        name=claims.get("name") or claims.get("unique_name"),
        role=_first_claim(claims, _ROLE_CLAIMS),
        claims=claims,
    )


def get_pagination(
    search: Optional[str] = Query(None, alias="Search"),
    page: int = Query(1, alias="Page", ge=0),
    page_size: int = Query(10, alias="PageSize", ge=1),
) -> PaginationSearchQueryParams:
    """Pagination query parameters: Search, Page, PageSize"""
    return PaginationSearchQueryParams(search=search, page=page, page_size=page_size)


def get_dispatcher(request: Request) -> ForwardingDispatcher:
    """Dispatcher for this request, carrying the caller's token if configured"""
    dispatcher: ForwardingDispatcher = request.app.state.dispatcher
    authorization = request.headers.get("authorization")
    if dispatcher.forward_authorization and authorization:
        return dispatcher.bind_headers({"Authorization": authorization})
    return dispatcher
