# bookyz/state.py

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .appointments import AppointmentStore
from .booking import BookingFlow
from .catalog import Catalog, load_catalog
from .profile import ProfileStore
from .storage import KeyValueStore


@dataclass
class AppState:
    catalog: Catalog
    appointments: AppointmentStore
    flow: BookingFlow
    profile: ProfileStore
    clock: Callable[[], datetime] = datetime.now

    def now(self) -> datetime:
        return self.clock()


def build_state(storage: KeyValueStore, clock: Callable[[], datetime] = datetime.now) -> AppState:
    catalog = load_catalog(clock())
    appointments = AppointmentStore(storage)
    return AppState(
        catalog=catalog,
        appointments=appointments,
        flow=BookingFlow(catalog, appointments, clock),
        profile=ProfileStore(storage),
        clock=clock,
    )
