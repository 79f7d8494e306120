"""Bundled HR employee records shipped with every build."""

EMPLOYEES = (
    {
        "id": "emp-1",
        "name": "Ahmed Al-Zahrani",
        "nationality": "Saudi",
        "idNumber": "1098765432",
        "gender": "Male",
        "age": 34,
        "mobile": "+966 551234567",
        "email": "ahmed.zahrani@example.org",
        "department": "Reception",
        "jobRank": "Supervisor",
        "shiftDuration": "8 hours",
        "shiftPeriod": "Morning",
        "contractStartDate": "2024-05-01",
        "contractEndDate": "2024-07-15",
        "numberOfDays": 75,
        "seasonalSalary": 18000.0,
        "dailySalary": 240.0,
        "mainTasks": ["Receive arriving groups", "Verify manifests"],
        "additionalTasks": ["Train new staff"],
        "recommendations": "",
        "createdAt": "2024-04-20T10:00:00.000Z",
    },
    {
        "id": "emp-2",
        "name": "Sara Al-Otaibi",
        "nationality": "Saudi",
        "idNumber": "1087654321",
        "gender": "Female",
        "age": 29,
        "mobile": "+966 552345678",
        "email": "sara.otaibi@example.org",
        "department": "Passports",
        "jobRank": "Officer",
        "shiftDuration": "8 hours",
        "shiftPeriod": "Evening",
        "contractStartDate": "2024-05-01",
        "contractEndDate": "2024-07-15",
        "numberOfDays": 75,
        "seasonalSalary": 15000.0,
        "dailySalary": 200.0,
        "mainTasks": ["Scan passports", "Assign passports to boxes"],
        "additionalTasks": [],
        "recommendations": "",
        "createdAt": "2024-04-21T10:00:00.000Z",
    },
    {
        "id": "emp-3",
        "name": "Yusuf Rahman",
        "nationality": "Indonesian",
        "idNumber": "2045678901",
        "gender": "Male",
        "age": 41,
        "mobile": "+966 553456789",
        "email": "yusuf.rahman@example.org",
        "department": "Housing",
        "jobRank": "Coordinator",
        "shiftDuration": "12 hours",
        "shiftPeriod": "Night",
        "contractStartDate": "2024-05-10",
        "contractEndDate": "2024-07-10",
        "numberOfDays": 61,
        "seasonalSalary": 14640.0,
        "dailySalary": 240.0,
        "mainTasks": ["Allocate tents", "Resolve housing complaints"],
        "additionalTasks": ["Translate for Indonesian groups"],
        "recommendations": "Renew for next season",
        "createdAt": "2024-04-25T10:00:00.000Z",
    },
)
