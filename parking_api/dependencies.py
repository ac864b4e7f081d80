from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from parking_api.core.config import settings
from parking_api.core.database import AsyncDBSession
from parking_api.schemas.principal import Principal
from parking_api.services.auth_service import AuthService

# Security scheme, missing header is reported by AuthService rather than FastAPI
api_token_header = APIKeyHeader(name=settings.API_TOKEN_HEADER, auto_error=False)


async def get_current_principal(
    request: Request,
    session: AsyncDBSession,
    api_token: Optional[str] = Depends(api_token_header),
) -> Principal:
    principal = await AuthService(session).authenticate(api_token)
    request.state.principal = principal
    return principal

CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
