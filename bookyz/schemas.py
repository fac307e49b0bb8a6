# bookyz/schemas.py

from pydantic import BaseModel, Field
from enum import Enum
from datetime import datetime, date as Date
from typing import Dict, List, Optional
from uuid import uuid4


def new_token() -> str:
    return str(uuid4())


class StoryMediaType(str, Enum):
    image = "image"
    video = "video"

class StoryIndicator(str, Enum):
    none = "none"
    viewed = "viewed"
    new = "new"

class AppointmentStatus(str, Enum):
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"

class BookingStep(str, Enum):
    selecting_staff = "selecting_staff"
    selecting_service = "selecting_service"
    selecting_date = "selecting_date"
    selecting_time = "selecting_time"
    confirming = "confirming"


# ---------- Catalog ----------

class SocialLinks(BaseModel):
    instagram: Optional[str] = None
    whatsapp: Optional[str] = None
    facebook: Optional[str] = None
    tiktok: Optional[str] = None

class Story(BaseModel):
    id: str
    media_type: StoryMediaType
    media_url: str
    thumbnail_url: Optional[str] = None   # only used for video
    caption: Optional[str] = None
    created_at: datetime
    viewed: bool = False
    active: bool = True                   # soft delete marker

class StaffMember(BaseModel):
    id: int
    name: str
    image: str
    social_links: Optional[SocialLinks] = None
    stories: Optional[List[Story]] = None

class StaffPublic(StaffMember):
    indicator: StoryIndicator
    social_urls: Dict[str, str]

class Service(BaseModel):
    id: str = Field(default_factory=new_token)
    name: str
    price: int = Field(ge=0)          # smallest currency unit
    duration: int = Field(gt=0)       # minutes
    icon: str

class DaySchedule(BaseModel):
    day: str
    day_hebrew: str
    is_open: bool
    open_time: Optional[str] = None
    close_time: Optional[str] = None

class BusinessSettings(BaseModel):
    business_name: str
    location: str
    phone_number: str
    instagram_username: Optional[str] = None
    booking_days_ahead: int
    opening_hours: List[DaySchedule]


# ---------- Appointments ----------

class Appointment(BaseModel):
    id: str = Field(default_factory=new_token)
    staff_id: int
    staff_name: str
    service_name: str
    price: int
    date: Date
    time: str = Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")  # HH:MM slot label
    status: AppointmentStatus = AppointmentStatus.confirmed
    created_at: datetime = Field(default_factory=datetime.now)

class AppointmentPublic(Appointment):
    display_status: str
    display_date: str

class AppointmentSummary(BaseModel):
    active: int
    completed: int
    cancelled: int

class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus


# ---------- Booking flow ----------

class BookingDraft(BaseModel):
    staff: Optional[StaffMember] = None
    service: Optional[Service] = None
    date: Date = Field(default_factory=Date.today)
    time: Optional[str] = None
    rescheduling_id: Optional[str] = None

class BookingState(BaseModel):
    step: BookingStep
    draft: BookingDraft
    subtitle: str
    exited: bool = False

class ChooseStaff(BaseModel):
    staff_id: int

class ChooseService(BaseModel):
    service_id: str

class ChooseDate(BaseModel):
    date: Date

class ChooseTime(BaseModel):
    time: str

class DateOption(BaseModel):
    date: Date
    label: str
    is_today: bool


# ---------- Stories ----------

class StaffStories(BaseModel):
    staff_id: int
    staff_name: str
    image: str
    indicator: StoryIndicator
    stories: List[Story]


# ---------- Profile ----------

class UserProfile(BaseModel):
    id: str = Field(default_factory=new_token)
    name: str = "עומר זנו"
    phone: str = "050-1234567"
    email: str = "omer@example.com"
    address: str = "באר שבע"
    total_appointments: int = 12
    loyalty_points: int = 650
    membership_level: str = "VIP"
    notifications_enabled: bool = True
    profile_image: Optional[str] = None

class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

class NotificationsUpdate(BaseModel):
    enabled: bool
