from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Server-reported failure carried under the ``error`` key of an envelope."""

    model_config = ConfigDict(frozen=True)

    message: str
    type: Optional[str] = None
    code: Optional[str] = None
    param: Optional[str] = None
