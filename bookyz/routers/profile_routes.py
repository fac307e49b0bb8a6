# bookyz/routers/profile_routes.py

from fastapi import APIRouter, Depends

from bookyz.deps import get_app_state
from bookyz.schemas import NotificationsUpdate, ProfileUpdate, UserProfile
from bookyz.state import AppState

router = APIRouter(
    prefix="/profile",
    tags=["profile"],
)


@router.get("", response_model=UserProfile)
def me(state: AppState = Depends(get_app_state)):
    return state.profile.current


@router.patch("", response_model=UserProfile)
def update_profile(changes: ProfileUpdate, state: AppState = Depends(get_app_state)):
    return state.profile.update(changes)


@router.put("/notifications", response_model=UserProfile)
def update_notifications(body: NotificationsUpdate, state: AppState = Depends(get_app_state)):
    return state.profile.set_notifications(body.enabled)


@router.post("/logout", response_model=UserProfile)
def logout(state: AppState = Depends(get_app_state)):
    return state.profile.logout()
