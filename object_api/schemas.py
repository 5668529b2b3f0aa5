"""API schemas.

`Object` is the record type shared by the repository and the JSON responses.
The request bodies only perform type decoding: missing text fields decode to
the empty string, wrong types are rejected with 400.
"""

from datetime import datetime

from pydantic import BaseModel


class Object(BaseModel):
    id: int
    name: str
    description: str
    created_at: datetime


class ObjectCreate(BaseModel):
    """Body of `/create`."""

    name: str = ""
    description: str = ""


class ObjectUpdate(ObjectCreate):
    """Body of `/update`. Only `name` and `description` are written.

    A missing `id` decodes to 0, which matches no row.
    """

    id: int = 0


class CreatedResponse(BaseModel):
    id: int


class MessageResponse(BaseModel):
    message: str
