# bookyz/routers/stories_routes.py

from typing import List

from fastapi import APIRouter, Depends

from bookyz.deps import get_app_state, conflict, not_found
from bookyz.errors import BookingFlowError, NotFound
from bookyz.schemas import BookingState, StaffStories, Story
from bookyz.state import AppState
from bookyz.stories import indicator, mark_viewed, valid_stories
from bookyz.routers.booking_routes import snapshot

router = APIRouter(
    tags=["stories"],
)


def to_stories(staff) -> StaffStories:
    return StaffStories(
        staff_id=staff.id,
        staff_name=staff.name,
        image=staff.image,
        indicator=indicator(staff),
        stories=valid_stories(staff),
    )


@router.get("/stories", response_model=List[StaffStories])
def stories_carousel(state: AppState = Depends(get_app_state)):
    return [to_stories(s) for s in state.catalog.staff]


@router.get("/staff/{staff_id}/stories", response_model=StaffStories)
def staff_stories(staff_id: int, state: AppState = Depends(get_app_state)):
    try:
        staff = state.catalog.get_staff(staff_id)
    except NotFound as exc:
        raise not_found(exc)
    return to_stories(staff)


@router.post("/staff/{staff_id}/stories/{story_id}/view", response_model=Story)
def view_story(staff_id: int, story_id: str, state: AppState = Depends(get_app_state)):
    try:
        story = state.catalog.get_story(staff_id, story_id)
    except NotFound as exc:
        raise not_found(exc)
    if not story.active:
        raise not_found(NotFound("Story", story_id))
    return mark_viewed(story)


@router.post("/staff/{staff_id}/book", response_model=BookingState)
def book_from_stories(staff_id: int, state: AppState = Depends(get_app_state)):
    try:
        staff = state.catalog.get_staff(staff_id)
        state.flow.start_with_staff(staff)
    except NotFound as exc:
        raise not_found(exc)
    except BookingFlowError as exc:
        raise conflict(exc)
    return snapshot(state)
