from typing import Optional

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    # Capability metadata beyond these fields is kept as extra attributes.
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    owned_by: str
    created: Optional[int] = None
    object: Optional[str] = None
