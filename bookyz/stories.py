# bookyz/stories.py

import logging
from typing import List

from .schemas import StaffMember, Story, StoryIndicator

log = logging.getLogger(__name__)


def is_valid(story: Story) -> bool:
    # Highlights stay valid until the barber deletes them
    return story.active


def valid_stories(staff: StaffMember) -> List[Story]:
    return [s for s in staff.stories or [] if is_valid(s)]


def has_any_stories(staff: StaffMember) -> bool:
    return any(is_valid(s) for s in staff.stories or [])


def has_new_stories(staff: StaffMember) -> bool:
    return any(is_valid(s) and not s.viewed for s in staff.stories or [])


def indicator(staff: StaffMember) -> StoryIndicator:
    """Ring shown around the staff avatar: coloured for new, grey once all seen."""
    if has_new_stories(staff):
        return StoryIndicator.new
    if has_any_stories(staff):
        return StoryIndicator.viewed
    return StoryIndicator.none


def mark_viewed(story: Story) -> Story:
    if not story.viewed:
        story.viewed = True
        log.debug("Story %s marked viewed", story.id)
    return story
