from pydantic import BaseModel, ConfigDict

from parking_api.models.users import Role


class Principal(BaseModel):
    """Authenticated caller attached to a single request."""
    model_config = ConfigDict(frozen=True)

    id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.admin
