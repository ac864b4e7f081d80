import logging
from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from parking_api.core.errors import InvalidServerState, Unauthorized
from parking_api.models.users import User
from parking_api.schemas.principal import Principal

logger = logging.getLogger(__name__)


class AuthService:
    """Resolves a raw API token to the calling principal."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_token(self, token: str) -> Optional[User]:
        # Plain equality on the stored token, no hashing
        result = await self.db.exec(select(User).where(User.api_token == token).limit(1))
        return result.first()

    async def authenticate(self, token: Optional[str]) -> Principal:
        """
        Authenticate a request by its API token.

        Args:
            token: Raw header value, None when the header is absent

        Returns:
            Principal with the user's id and role

        Raises:
            Unauthorized: If the token is missing or matches no user
            InvalidServerState: If the matching user row lacks id or role
        """
        if not token:
            raise Unauthorized()

        user = await self.get_user_by_token(token)
        if user is None:
            logger.warning("Rejected request with unknown API token")
            raise Unauthorized()

        if user.id is None or not user.role:
            logger.error(f"User row matched by API token is incomplete: {user!r}")
            raise InvalidServerState()

        return Principal(id=user.id, role=user.role)
