# server/core/responses.py

from typing import Any, Literal
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"


class Envelope(BaseModel):
    """
    Uniform body of every API response.
    """
    status: Literal["success", "failed"]
    message: str
    data: Any = None


def success(message: str, data: Any = None, status_code: int = 200, headers: dict | None = None) -> JSONResponse:
    body = Envelope(status=STATUS_SUCCESS, message=message, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)


def failed(message: str, data: Any = None, status_code: int = 200, headers: dict | None = None) -> JSONResponse:
    body = Envelope(status=STATUS_FAILED, message=message, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)
