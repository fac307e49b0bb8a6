# bookyz/deps.py

from fastapi import HTTPException, Request

from .errors import BookingFlowError, NotFound
from .state import AppState


def get_app_state(request: Request) -> AppState:
    return request.app.state.bookyz


def not_found(exc: NotFound) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))


def conflict(exc: BookingFlowError) -> HTTPException:
    return HTTPException(status_code=409, detail=str(exc))
