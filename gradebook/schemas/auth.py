from pydantic import Field
from gradebook.schemas.common import CamelModel


class LoginRequest(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AdminPublic(CamelModel):
    """Admin as shown to clients; the password hash never leaves the server."""
    id: int
    name: str
    email: str
    is_super_admin: bool
