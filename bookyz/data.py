# bookyz/data.py

# Static catalog. Story offsets are relative to catalog load time.
STAFF = [
    {
        "id": 1,
        "name": "LIAM",
        "image": "barber1",
        "social_links": {"instagram": "liam_barber", "whatsapp": "0500000000", "tiktok": "liamcuts"},
        "stories": [
            {"id": "liam_1", "media_url": "barber1", "caption": "תספורת חדשה שעשיתי היום! 💈✨", "age": {"days": 2}},
            {"id": "liam_2", "media_url": "barber1", "caption": "מחכה לכם במספרה! קבעו תור 🔥", "age": {"days": 1}},
        ],
    },
    {
        "id": 2,
        "name": "ירון",
        "image": "barber2",
        "social_links": {"instagram": "yaron_style", "whatsapp": "0500000001", "facebook": "Yaron Barber"},
        "stories": [
            {"id": "yaron_1", "media_url": "barber2", "caption": "סגנון חדש לשבוע הזה 💇‍♂️", "age": {"days": 3}},
        ],
    },
    {
        "id": 3,
        "name": "אמיר",
        "image": "barber3",
        "social_links": {"instagram": "amir_cuts", "whatsapp": "0500000002"},
        "stories": [
            {"id": "amir_1", "media_url": "barber3", "caption": "תספורת פרימיום ⭐", "age": {"days": 5}},
            {"id": "amir_2", "media_url": "barber3", "caption": "עבודות מהשבוע האחרון 🔥", "age": {"hours": 12}},
        ],
    },
    {
        "id": 4,
        "name": "עמית",
        "image": "barber4",
        "social_links": {"instagram": "amit_hair", "whatsapp": "0500000003", "tiktok": "amit_tok"},
        "stories": None,
    },
    {
        "id": 5,
        "name": "קווין",
        "image": "barber5",
        "social_links": {"whatsapp": "0500000004"},
        "stories": None,
    },
]

# name -> (price, duration minutes, icon)
SERVICES = {
    "תספורת": (80, 20, "scissors"),
    "תספורת וזקן": (90, 20, "mustache"),
    "All Scissors": (120, 30, "scissors"),
    "פרימיום (תור כפול)": (170, 40, "crown"),
}

TIME_SLOTS = [
    "09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
    "12:00", "12:30", "13:00", "13:30", "14:00", "14:30",
]

shop_settings = {
    "business_name": "515 | BRAVENCE",
    "location": "באר שבע",
    "phone_number": "050-0000000",
    "instagram_username": "bravence515",
    "booking_days_ahead": 7,
    "opening_hours": [
        {"day": "Sunday", "day_hebrew": "ראשון", "is_open": True, "open_time": "09:00", "close_time": "19:00"},
        {"day": "Monday", "day_hebrew": "שני", "is_open": True, "open_time": "09:00", "close_time": "19:00"},
        {"day": "Tuesday", "day_hebrew": "שלישי", "is_open": True, "open_time": "09:00", "close_time": "19:00"},
        {"day": "Wednesday", "day_hebrew": "רביעי", "is_open": True, "open_time": "09:00", "close_time": "19:00"},
        {"day": "Thursday", "day_hebrew": "חמישי", "is_open": True, "open_time": "09:00", "close_time": "19:00"},
        {"day": "Friday", "day_hebrew": "שישי", "is_open": True, "open_time": "09:00", "close_time": "14:00"},
        {"day": "Saturday", "day_hebrew": "שבת", "is_open": False},
    ],
}

# 0=Mon ... 6=Sun, matching date.weekday()
HEBREW_WEEKDAYS = ["שני", "שלישי", "רביעי", "חמישי", "שישי", "שבת", "ראשון"]
