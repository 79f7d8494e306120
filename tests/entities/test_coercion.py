import pytest

from src.hajj_dashboard.hajj_dashboard.core.exceptions import ValidationError
from src.hajj_dashboard.hajj_dashboard.entities.catalog import EMPLOYEE, ORGANIZER
from src.hajj_dashboard.hajj_dashboard.entities.coercion import coerce_fields, coerce_text


def test_typed_fields():
    assert coerce_text(EMPLOYEE, "age", " 41 ") == 41
    assert coerce_text(EMPLOYEE, "age", "41.0") == 41
    assert coerce_text(EMPLOYEE, "dailySalary", "350.5") == 350.5
    assert coerce_text(EMPLOYEE, "mainTasks", "Guide;  Transport ;") == ["Guide", "Transport"]
    assert coerce_text(EMPLOYEE, "age", "  ") is None
    assert coerce_text(EMPLOYEE, "name", "  Sara ") == "  Sara "


def test_bad_numbers_are_rejected():
    with pytest.raises(ValidationError):
        coerce_text(EMPLOYEE, "age", "41.5")
    with pytest.raises(ValidationError):
        coerce_text(ORGANIZER, "hajjCount", "many")
    with pytest.raises(ValidationError):
        coerce_text(EMPLOYEE, "seasonalSalary", "a lot")


def test_only_known_fields_are_kept():
    out = coerce_fields(ORGANIZER, {"organizerNumber": "ORG-1", "hajjCount": "3", "csrf": "x"}, only_known=True)

    assert out == {"organizerNumber": "ORG-1", "hajjCount": 3}



def test_list_cells_accept_json_arrays():
    assert coerce_text(EMPLOYEE, "mainTasks", '["Guide; night shift", "", "Transport"]') == ["Guide; night shift", "", "Transport"]
    assert coerce_text(EMPLOYEE, "mainTasks", "[]") == []
    assert coerce_text(EMPLOYEE, "mainTasks", "") == []
    with pytest.raises(ValidationError):
        coerce_text(EMPLOYEE, "mainTasks", '["unterminated')
