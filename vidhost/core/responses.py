"""
Success envelope shared by every endpoint
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def api_response(data: Any, message: str = "Success", status_code: int = 200) -> JSONResponse:
    """Wrap data as {statusCode, data, message, success}"""
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True)
    return JSONResponse(
        status_code=status_code,
        content={
            "statusCode": status_code,
            "data": jsonable_encoder(data),
            "message": message,
            "success": status_code < 400,
        },
    )
