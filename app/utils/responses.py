# app/utils/responses.py
from typing import Optional

from fastapi.responses import JSONResponse


def failure(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    """Error envelope shared by every exception handler"""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )
