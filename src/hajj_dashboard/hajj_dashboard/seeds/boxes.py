"""Passport storage boxes, flattened: the owning organizer is kept as three plain fields."""

PASSPORT_BOXES = (
    {
        "id": "box-1",
        "number": "Box 001",
        "shelf": "A",
        "nationality": "Egyptian",
        "organizerId": "org-1",
        "organizerNumber": "ORG-001",
        "organizerName": "Al-Sheikh Travel & Tourism",
        "passportCount": 12,
        "maxCapacity": 50,
        "createdAt": "2024-03-01T08:00:00.000Z",
    },
    {
        "id": "box-2",
        "number": "Box 002",
        "shelf": "A",
        "nationality": "Pakistani",
        "organizerId": "org-2",
        "organizerNumber": "ORG-002",
        "organizerName": "Makkah Tours International",
        "passportCount": 8,
        "maxCapacity": 50,
        "createdAt": "2024-03-01T08:00:00.000Z",
    },
    {
        "id": "box-3",
        "number": "Box 003",
        "shelf": "A",
        "nationality": "Saudi",
        "organizerId": "org-3",
        "organizerNumber": "ORG-003",
        "organizerName": "Hajj & Umrah Services",
        "passportCount": 15,
        "maxCapacity": 50,
        "createdAt": "2024-03-01T08:00:00.000Z",
    },
    {
        "id": "box-4",
        "number": "Box 004",
        "shelf": "A",
        "nationality": "Jordanian",
        "organizerId": "org-4",
        "organizerNumber": "ORG-004",
        "organizerName": "Al-Haramain Pilgrimage",
        "passportCount": 5,
        "maxCapacity": 50,
        "createdAt": "2024-03-01T08:00:00.000Z",
    },
    {
        "id": "box-5",
        "number": "Box 005",
        "shelf": "B",
        "nationality": None,
        "organizerId": None,
        "organizerNumber": None,
        "organizerName": None,
        "passportCount": 0,
        "maxCapacity": 50,
        "createdAt": "2024-03-01T08:00:00.000Z",
    },
)
