from pydantic import BaseModel
from typing import Any, Dict


class DispatchRequest(BaseModel):
    ref: str
    inputs: Dict[str, Any]
