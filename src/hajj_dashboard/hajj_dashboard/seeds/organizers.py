"""Bundled organizer records shipped with every build."""

ORGANIZERS = (
    {
        "id": "org-1",
        "organizerNumber": "ORG-001",
        "licenseNumber": "LIC-2024-1187",
        "organizerName": "Mahmoud Al-Sheikh",
        "company": "Al-Sheikh Travel & Tourism",
        "hajjCount": 450,
        "nationality": "Egyptian",
        "gender": "Male",
        "phoneCountryCode": "+20",
        "phoneNumber": "1001234567",
        "phone": "+20 1001234567",
        "countryPhoneCountryCode": "+966",
        "countryPhoneNumber": "501234567",
        "countryPhone": "+966 501234567",
        "passport": "A12345678",
        "email": "info@alsheikh-travel.example",
        "createdAt": "2024-01-15T08:00:00.000Z",
    },
    {
        "id": "org-2",
        "organizerNumber": "ORG-002",
        "licenseNumber": "LIC-2024-2210",
        "organizerName": "Imran Qureshi",
        "company": "Makkah Tours International",
        "hajjCount": 320,
        "nationality": "Pakistani",
        "gender": "Male",
        "phoneCountryCode": "+92",
        "phoneNumber": "3001234567",
        "phone": "+92 3001234567",
        "countryPhoneCountryCode": "+966",
        "countryPhoneNumber": "502345678",
        "countryPhone": "+966 502345678",
        "passport": "PK9876543",
        "email": "contact@makkah-tours.example",
        "createdAt": "2024-01-20T09:30:00.000Z",
    },
    {
        "id": "org-3",
        "organizerNumber": "ORG-003",
        "licenseNumber": "LIC-2024-0931",
        "organizerName": "Fatimah Al-Harbi",
        "company": "Hajj & Umrah Services",
        "hajjCount": 275,
        "nationality": "Saudi",
        "gender": "Female",
        "phoneCountryCode": "+966",
        "phoneNumber": "503456789",
        "phone": "+966 503456789",
        "countryPhoneCountryCode": "+966",
        "countryPhoneNumber": "503456789",
        "countryPhone": "+966 503456789",
        "passport": "SA1122334",
        "email": "service@hajj-umrah.example",
        "createdAt": "2024-02-02T11:15:00.000Z",
    },
    {
        "id": "org-4",
        "organizerNumber": "ORG-004",
        "licenseNumber": "LIC-2024-3302",
        "organizerName": "Khaled Al-Masri",
        "company": "Al-Haramain Pilgrimage",
        "hajjCount": 180,
        "nationality": "Jordanian",
        "gender": "Male",
        "phoneCountryCode": "+962",
        "phoneNumber": "791234567",
        "phone": "+962 791234567",
        "countryPhoneCountryCode": "+966",
        "countryPhoneNumber": "504567890",
        "countryPhone": "+966 504567890",
        "passport": "JO5566778",
        "email": "hello@alharamain.example",
        "createdAt": "2024-02-10T07:45:00.000Z",
    },
)
