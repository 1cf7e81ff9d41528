# app/routers/responses.py
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.actions.common import INVALID_INPUT, NOT_FOUND_ERRORS, UNAUTHORIZED

def action_response(result: dict, *, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Send an action result as-is, choosing the HTTP status from its outcome."""
    if result["success"]:
        code = success_status
    elif result["error"] == UNAUTHORIZED:
        code = status.HTTP_401_UNAUTHORIZED
    elif result["error"] == INVALID_INPUT:
        code = 422
    elif result["error"] in NOT_FOUND_ERRORS:
        code = status.HTTP_404_NOT_FOUND
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers = {"WWW-Authenticate": "Bearer"} if code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=code, content=jsonable_encoder(result), headers=headers)
