# bookyz/catalog.py

import logging
from dataclasses import dataclass, field
from datetime import datetime, date, timedelta
from typing import Dict, List

from .data import STAFF, SERVICES, TIME_SLOTS, shop_settings
from .errors import NotFound
from .schemas import (
    StaffMember, SocialLinks, Story, StoryMediaType, Service,
    BusinessSettings, DateOption,
)

log = logging.getLogger(__name__)


@dataclass
class Catalog:
    staff: List[StaffMember]
    services: List[Service]
    time_slots: List[str]
    settings: BusinessSettings
    _staff_by_id: Dict[int, StaffMember] = field(init=False, repr=False)

    def __post_init__(self):
        self._staff_by_id = {s.id: s for s in self.staff}

    def get_staff(self, staff_id: int) -> StaffMember:
        staff = self._staff_by_id.get(staff_id)
        if staff is None:
            raise NotFound("Staff member", staff_id)
        return staff

    def get_service(self, service_id: str) -> Service:
        for service in self.services:
            if service.id == service_id:
                return service
        raise NotFound("Service", service_id)

    def get_story(self, staff_id: int, story_id: str) -> Story:
        staff = self.get_staff(staff_id)
        for story in staff.stories or []:
            if story.id == story_id:
                return story
        raise NotFound("Story", story_id)


def load_catalog(now: datetime) -> Catalog:
    """Build a fresh catalog from the static data in bookyz.data."""
    staff = []
    for raw in STAFF:
        stories = None
        if raw["stories"] is not None:
            stories = [
                Story(
                    id=s["id"],
                    media_type=StoryMediaType.image,
                    media_url=s["media_url"],
                    caption=s["caption"],
                    created_at=now - timedelta(**s["age"]),
                )
                for s in raw["stories"]
            ]
        staff.append(
            StaffMember(
                id=raw["id"],
                name=raw["name"],
                image=raw["image"],
                social_links=SocialLinks(**raw["social_links"]),
                stories=stories,
            )
        )

    services = [
        Service(name=name, price=price, duration=duration, icon=icon)
        for name, (price, duration, icon) in SERVICES.items()
    ]

    catalog = Catalog(
        staff=staff,
        services=services,
        time_slots=list(TIME_SLOTS),
        settings=BusinessSettings(**shop_settings),
    )
    log.info("Catalog loaded: %d staff, %d services", len(staff), len(services))
    return catalog


def social_urls(links: SocialLinks) -> Dict[str, str]:
    """Deep links for the social buttons on the team page. Missing handles are omitted."""
    urls = {}
    if links.instagram:
        urls["instagram"] = f"instagram://user?username={links.instagram}"
    if links.whatsapp:
        urls["whatsapp"] = f"https://wa.me/{links.whatsapp}"
    if links.facebook:
        urls["facebook"] = "fb://profile"
    if links.tiktok:
        urls["tiktok"] = "tiktok://"
    return urls


def available_dates(today: date, days: int) -> List[DateOption]:
    options = []
    for offset in range(days):
        d = today + timedelta(days=offset)
        label = d.strftime("%d.%m")
        if offset == 0:
            label = f"היום, {label}"
        options.append(DateOption(date=d, label=label, is_today=offset == 0))
    return options
