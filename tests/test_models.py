import json

import pytest

from perfmgmt.models import (
    Employee,
    FunctionTeams,
    PerformanceReview,
    Role,
    employee_to_json,
    function_team_to_string,
    json_to_employee,
    role_to_string,
    string_to_function_team,
    string_to_role,
)


@pytest.mark.parametrize(
    "role,name",
    [
        (Role.MANAGER, "Manager"),
        (Role.BOSS, "Boss"),
        (Role.SPECIALIST, "Specialist"),
        (Role.TECHNICIAN, "Technician"),
        (Role.UNKNOWN, "unknown"),
    ],
)
def test_role_to_string(role, name):
    assert role_to_string(role) == name
    assert str(role) == name


@pytest.mark.parametrize("role", [Role.MANAGER, Role.BOSS, Role.SPECIALIST, Role.TECHNICIAN])
def test_role_round_trip(role):
    assert string_to_role(role_to_string(role)) is role


@pytest.mark.parametrize("text", ["unknown", "manager", "", "BOSS", "Engineer"])
def test_string_to_role_rejects_unknown(text):
    assert string_to_role(text) is None


@pytest.mark.parametrize("team", list(FunctionTeams))
def test_function_team_round_trip(team):
    assert string_to_function_team(function_team_to_string(team)) is team


def test_function_team_names():
    assert function_team_to_string(FunctionTeams.ENGINEERING) == "ENGINEERING"
    assert string_to_function_team("software") is None


def test_employee_defaults():
    employee = Employee()
    assert employee.role is Role.SPECIALIST
    assert employee.is_active is True
    assert employee.reports_to is None
    assert employee.name == ""


def test_employee_str_without_manager():
    employee = Employee(1, 20251207, "George Michael", "20200101", Role.BOSS, True, None)
    expected = (
        "------------------\n"
        "Employee ID: 1\n"
        "Personnel Code: 20251207\n"
        "Name: George Michael\n"
        "Hire Date: 20200101\n"
        "Role: Boss\n"
        "Employee Status: Active\n"
        "ReportsTo: null\n"
    )
    assert str(employee) == expected


def test_employee_str_inactive_with_manager():
    employee = Employee(2, 20251208, "John Nash", "20200101", Role.SPECIALIST, False, 1)
    text = str(employee)
    assert "Employee Status: Not-Active\n" in text
    assert text.endswith("ReportsTo: 1\n")


def test_employee_to_json_with_reports_to():
    employee = Employee(2, 20251208, "John Nash", "20200101", Role.SPECIALIST, True, 1)
    assert employee_to_json(employee) == {
        "employeeId": 2,
        "name": "John Nash",
        "hireDate": "20200101",
        "personnelCode": 20251208,
        "isActive": True,
        "role": "Specialist",
        "reportsTo": 1,
    }


def test_employee_to_json_omits_missing_reports_to():
    employee = Employee(1, 20251207, "George Michael", "20200101", Role.BOSS, True, None)
    assert "reportsTo" not in employee_to_json(employee)


@pytest.mark.parametrize(
    "employee",
    [
        Employee(1, 20251207, "George Michael", "20200101", Role.BOSS, True, None),
        Employee(3, 20251209, "Albert Einstein", "20200101", Role.TECHNICIAN, False, 1),
        Employee(4, 20251210, "Mahmoud Hesabi", "20200101", Role.MANAGER, True, 4),
    ],
)
def test_json_round_trip(employee):
    assert json_to_employee(employee_to_json(employee)) == employee


def test_json_round_trip_through_text():
    employee = Employee(3, 20251209, "Albert Einstein", "20200101", Role.SPECIALIST, True, 1)
    text = json.dumps(employee_to_json(employee))
    assert json_to_employee(json.loads(text)) == employee


def test_json_to_employee_empty_object():
    employee = json_to_employee({})
    assert employee.employee_id == 0
    assert employee.personnel_code == 0
    assert employee.name == ""
    assert employee.hire_date == ""
    assert employee.is_active is False
    assert employee.role is Role.UNKNOWN
    assert employee.reports_to is None


def test_json_to_employee_unknown_role():
    employee = json_to_employee({"role": "Janitor"})
    assert employee.role is Role.UNKNOWN


def test_json_to_employee_null_reports_to():
    employee = json_to_employee({"reportsTo": None, "employeeId": 5})
    assert employee.reports_to is None
    assert employee.employee_id == 5


def test_json_to_employee_wrong_types_fall_back():
    employee = json_to_employee(
        {"employeeId": "7", "name": 12, "isActive": 1, "personnelCode": 2.5}
    )
    assert employee.employee_id == 0
    assert employee.name == ""
    assert employee.is_active is False
    assert employee.personnel_code == 0


def test_json_to_employee_whole_float_is_int():
    employee = json_to_employee({"employeeId": 9.0, "reportsTo": 1.0})
    assert employee.employee_id == 9
    assert employee.reports_to == 1


def _sample_review():
    return PerformanceReview(
        1, 2, 1, "2025-04-27", 9.5, 9.0, 8.5, 8.0, 9.0, 9.9, 10.0, 10.0, 8.0, 7.0, 10.0, "He is good!"
    )


def test_review_defaults():
    review = PerformanceReview()
    assert review.overall_rating is None
    assert review.comments is None
    assert review.punctuality_rating == 0.0


def test_review_str_contents():
    text = str(_sample_review())
    lines = text.splitlines()
    assert lines[0] == "Review ID : 1"
    assert lines[1] == "Date of Review : 2025-04-27"
    assert lines[2] == "Overall Rating : 9.5"
    assert "Quality of Work : 8.5" in lines
    assert "Technical Skill Rating : 9.9" in lines
    assert lines[-2] == "Comments : "
    assert lines[-1] == "He is good!"


def test_review_str_without_optional_parts():
    review = PerformanceReview(review_id=3, review_date="2025-01-01")
    text = str(review)
    assert "Overall Rating" not in text
    assert "Comments" not in text
    assert text.splitlines()[-1].startswith("Initiative Rating : ")
    assert len(text.splitlines()) == 12