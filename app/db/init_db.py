import logging
from datetime import datetime, timedelta, timezone

from app.db.store import RecordStore

logger = logging.getLogger(__name__)

AVATAR_URL = (
    "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e"
    "?ixlib=rb-1.2.1&auto=format&fit=facearea&facepad=2&w=256&h=256&q=80"
)

DEMO_USERS = [
    {
        "username": "admin",
        "email": "admin@example.com",
        "password": "admin123",
        "firstName": "John",
        "lastName": "Admin",
        "phone": "+1 (555) 123-4567",
        "bio": "System administrator with 5+ years of experience in car fleet management.",
        "role": "admin",
        "status": "active",
        "language": "en",
        "timezone": "UTC-5",
        "avatar": AVATAR_URL,
    },
    {
        "username": "jane.cooper",
        "email": "jane.cooper@example.com",
        "password": "password123",
        "firstName": "Jane",
        "lastName": "Cooper",
        "phone": "+1 (555) 234-5678",
        "bio": "Regular user",
        "role": "user",
        "status": "active",
        "language": "en",
        "timezone": "UTC-5",
        "avatar": (
            "https://images.unsplash.com/photo-1494790108755-2616b612b786"
            "?ixlib=rb-1.2.1&auto=format&fit=facearea&facepad=2&w=256&h=256&q=80"
        ),
        "joinDate": datetime(2024, 1, 15, tzinfo=timezone.utc),
    },
    {
        "username": "tom.cook",
        "email": "tom.cook@example.com",
        "password": "password123",
        "firstName": "Tom",
        "lastName": "Cook",
        "phone": "+1 (555) 345-6789",
        "bio": "Professional driver",
        "role": "driver",
        "status": "inactive",
        "language": "en",
        "timezone": "UTC-5",
        "avatar": AVATAR_URL,
        "joinDate": datetime(2023, 12, 22, tzinfo=timezone.utc),
    },
]

DEMO_CARS = [
    {
        "make": "Toyota",
        "model": "Camry",
        "year": 2024,
        "licensePlate": "ABC-123",
        "owner": "John Smith",
        "status": "active",
        "location": "New York, NY",
        "latitude": "40.7128",
        "longitude": "-74.0060",
        "image": "https://images.unsplash.com/photo-1549924231-f129b911e442?ixlib=rb-4.0.3&auto=format&fit=crop&w=300&h=200",
    },
    {
        "make": "Honda",
        "model": "Civic",
        "year": 2023,
        "licensePlate": "XYZ-456",
        "owner": "Sarah Johnson",
        "status": "maintenance",
        "location": "Los Angeles, CA",
        "latitude": "34.0522",
        "longitude": "-118.2437",
        "image": "https://images.unsplash.com/photo-1606664515524-ed2f786a0bd6?ixlib=rb-4.0.3&auto=format&fit=crop&w=300&h=200",
    },
    {
        "make": "Ford",
        "model": "F-150",
        "year": 2023,
        "licensePlate": "DEF-789",
        "owner": "Mike Wilson",
        "status": "active",
        "location": "Chicago, IL",
        "latitude": "41.8781",
        "longitude": "-87.6298",
        "image": "https://images.unsplash.com/photo-1594736797933-d0ef6ba6373e?ixlib=rb-4.0.3&auto=format&fit=crop&w=300&h=200",
    },
]


def init_db(store: RecordStore) -> None:
    """
    Load the demo users, cars and reports into an empty store.
    Reports reference the seeded users and cars by their generated ids.
    """
    now = datetime.now(timezone.utc)
    last_active = [now, now - timedelta(hours=2), now - timedelta(days=3)]

    users = [
        store.users.create({**data, "lastActive": seen})
        for data, seen in zip(DEMO_USERS, last_active)
    ]
    cars = [store.cars.create(data) for data in DEMO_CARS]

    demo_reports = [
        {
            "userId": users[1].id,
            "carId": cars[0].id,
            "type": "accident",
            "message": (
                "Minor collision at intersection, no injuries reported. "
                "Vehicle needs inspection and minor repairs to front bumper."
            ),
            "status": "pending",
            "priority": "high",
            "createdAt": datetime(2024, 1, 20, tzinfo=timezone.utc),
        },
        {
            "userId": users[2].id,
            "carId": cars[1].id,
            "type": "maintenance",
            "message": (
                "Regular maintenance due for vehicle. Oil change and brake "
                "inspection needed. Last service was 6 months ago."
            ),
            "status": "resolved",
            "priority": "medium",
            "createdAt": datetime(2024, 1, 18, tzinfo=timezone.utc),
            "resolvedAt": datetime(2024, 1, 19, tzinfo=timezone.utc),
        },
        {
            "userId": users[1].id,
            "carId": None,
            "type": "complaint",
            "message": (
                "Having issues with the mobile app. Unable to track vehicle "
                "location properly. App crashes frequently."
            ),
            "status": "reviewed",
            "priority": "medium",
            "createdAt": datetime(2024, 1, 15, tzinfo=timezone.utc),
        },
    ]
    for data in demo_reports:
        store.reports.create(data)

    logger.info(
        f"Seeded {store.users.count()} users, {store.cars.count()} cars "
        f"and {store.reports.count()} reports"
    )
