from __future__ import annotations

from ..core.constants import EMPLOYEES_PARTITION, ORGANIZERS_PARTITION, PASSPORT_BOXES_PARTITION
from .model import EntityType

ORGANIZER = EntityType(
    name="organizer",
    partition=ORGANIZERS_PARTITION,
    fields=(
        "id",
        "organizerNumber",
        "licenseNumber",
        "organizerName",
        "company",
        "hajjCount",
        "nationality",
        "gender",
        "phoneCountryCode",
        "phoneNumber",
        "phone",
        "countryPhoneCountryCode",
        "countryPhoneNumber",
        "countryPhone",
        "passport",
        "email",
        "imageURL",
        "createdAt",
    ),
    business_key="organizerNumber",
    integer_fields=frozenset({"hajjCount"}),
    image_field="imageURL",
)

# Employees have no separate business number; the record id doubles as the key.
EMPLOYEE = EntityType(
    name="employee",
    partition=EMPLOYEES_PARTITION,
    fields=(
        "id",
        "name",
        "nationality",
        "idNumber",
        "gender",
        "age",
        "mobile",
        "email",
        "department",
        "jobRank",
        "shiftDuration",
        "shiftPeriod",
        "contractStartDate",
        "contractEndDate",
        "numberOfDays",
        "seasonalSalary",
        "dailySalary",
        "mainTasks",
        "additionalTasks",
        "recommendations",
        "profilePicture",
        "createdAt",
    ),
    business_key="id",
    integer_fields=frozenset({"age", "numberOfDays"}),
    float_fields=frozenset({"seasonalSalary", "dailySalary"}),
    list_fields=frozenset({"mainTasks", "additionalTasks"}),
    image_field="profilePicture",
)

PASSPORT_BOX = EntityType(
    name="passport_box",
    partition=PASSPORT_BOXES_PARTITION,
    fields=(
        "id",
        "number",
        "shelf",
        "nationality",
        "organizerId",
        "organizerNumber",
        "organizerName",
        "passportCount",
        "maxCapacity",
        "createdAt",
    ),
    business_key="number",
    integer_fields=frozenset({"passportCount", "maxCapacity"}),
)

ENTITY_TYPES: dict[str, EntityType] = {t.partition: t for t in (ORGANIZER, EMPLOYEE, PASSPORT_BOX)}
