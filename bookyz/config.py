# bookyz/config.py
import os

# SQLite file that plays the role of the device's local key-value storage
DATABASE_URL = os.environ.get("BOOKYZ_DATABASE_URL", "sqlite:///./bookyz.db")
SQL_ECHO = os.environ.get("BOOKYZ_SQL_ECHO", "0") in {"1", "true", "True"}

LOG_LEVEL = os.environ.get("BOOKYZ_LOG_LEVEL", "INFO").upper()

# Fixed storage keys
PROFILE_KEY = "currentUser"
APPOINTMENTS_KEY = "barbershopAppointments"
