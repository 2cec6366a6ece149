"""
Auth API Schemas - Pydantic models for remote responses
"""

from pydantic import BaseModel, ConfigDict, Field

from ticketing_client.service.session.domain.principal import Principal, Role


class PrincipalSchema(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, extra='ignore')

    id: str
    email: str
    name: str = ''
    role: Role = Role.USER

    def to_entity(self) -> Principal:
        return Principal(id=self.id, email=self.email, name=self.name, role=self.role)


class LoginResponse(BaseModel):
    """POST /auth/login"""

    model_config = ConfigDict(extra='ignore')

    token: str = Field(..., min_length=1)
    user: PrincipalSchema


class UserEnvelope(BaseModel):
    """GET /auth/validate and PUT /user/profile"""

    model_config = ConfigDict(extra='ignore')

    user: PrincipalSchema
