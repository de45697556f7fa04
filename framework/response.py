from typing import Any, Optional
from pydantic import BaseModel


class ResponseModel(BaseModel):
    """JSON envelope shared by every endpoint and by the exception handlers."""

    code: int = 200
    message: str = "success"
    data: Optional[Any] = None

    @staticmethod
    def success(data: Any = None, message: str = "success"):
        return ResponseModel(data=data, message=message).model_dump()

    @staticmethod
    def fail(code: int = 400, message: str = "error", data: Any = None):
        return ResponseModel(code=code, message=message, data=data).model_dump()
