"""User Schemas — Pydantic models for the /users API boundary.

Invariants:
    - Create/Update requests carry only name; id and createdAt are never client-supplied
    - User is the external representation: id, name, createdAt (camelCase on the wire)
    - Empty name is accepted (no validation beyond type coercion)
"""

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """POST body. Extra fields such as id/createdAt are ignored."""
    name: str


class UserUpdateRequest(BaseModel):
    """PUT body. Only name is mutable."""
    name: str


class User(BaseModel):
    """External representation of a stored user."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    created_at: str = Field(alias="createdAt")
