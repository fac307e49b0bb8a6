# bookyz/routers/catalog_routes.py

from typing import List

from fastapi import APIRouter, Depends

from bookyz.catalog import available_dates, social_urls
from bookyz.deps import get_app_state, not_found
from bookyz.errors import NotFound
from bookyz.schemas import BusinessSettings, DateOption, Service, SocialLinks, StaffPublic
from bookyz.state import AppState
from bookyz.stories import indicator

router = APIRouter(
    tags=["catalog"],
)


def to_public(staff) -> StaffPublic:
    return StaffPublic(
        **staff.model_dump(),
        indicator=indicator(staff),
        social_urls=social_urls(staff.social_links or SocialLinks()),
    )


@router.get("/business", response_model=BusinessSettings)
def business(state: AppState = Depends(get_app_state)):
    return state.catalog.settings


@router.get("/staff", response_model=List[StaffPublic])
def list_staff(state: AppState = Depends(get_app_state)):
    return [to_public(s) for s in state.catalog.staff]


@router.get("/staff/{staff_id}", response_model=StaffPublic)
def get_staff(staff_id: int, state: AppState = Depends(get_app_state)):
    try:
        staff = state.catalog.get_staff(staff_id)
    except NotFound as exc:
        raise not_found(exc)
    return to_public(staff)


@router.get("/services", response_model=List[Service])
def list_services(state: AppState = Depends(get_app_state)):
    return state.catalog.services


@router.get("/time-slots", response_model=List[str])
def list_time_slots(state: AppState = Depends(get_app_state)):
    return state.catalog.time_slots


@router.get("/dates", response_model=List[DateOption])
def list_dates(state: AppState = Depends(get_app_state)):
    return available_dates(state.now().date(), state.catalog.settings.booking_days_ahead)
