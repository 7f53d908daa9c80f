"""Domain models for employees and their performance reviews."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class Role(Enum):
    """Position an employee holds in the organisation."""

    MANAGER = "Manager"
    BOSS = "Boss"
    SPECIALIST = "Specialist"
    TECHNICIAN = "Technician"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return role_to_string(self)


class FunctionTeams(Enum):
    """Functional team an employee may belong to."""

    HARDWARE = "HARDWARE"
    SOFTWARE = "SOFTWARE"
    MECHANIC = "MECHANIC"
    ENGINEERING = "ENGINEERING"
    PRODUCT = "PRODUCT"

    def __str__(self) -> str:
        return function_team_to_string(self)


_KNOWN_ROLES = {role.value: role for role in Role if role is not Role.UNKNOWN}
_KNOWN_TEAMS = {team.value: team for team in FunctionTeams}


def role_to_string(role: Role) -> str:
    """Return the display name of a role; anything unrecognised is 'unknown'."""
    if isinstance(role, Role):
        return role.value
    return Role.UNKNOWN.value


def string_to_role(role_str: str) -> Optional[Role]:
    """Return the role named by ``role_str``, or None if it names none."""
    return _KNOWN_ROLES.get(role_str)


def function_team_to_string(team: FunctionTeams) -> str:
    """Return the name of a functional team; anything unrecognised is 'unknown'."""
    if isinstance(team, FunctionTeams):
        return team.value
    return "unknown"


def string_to_function_team(team_str: str) -> Optional[FunctionTeams]:
    """Return the team named by ``team_str``, or None if it names none."""
    return _KNOWN_TEAMS.get(team_str)


def _format_rating(value: float) -> str:
    return format(value, "g")


@dataclass
class Employee:
    """A person on the staff."""

    employee_id: int = 0
    personnel_code: int = 0
    name: str = ""
    hire_date: str = ""
    role: Role = Role.SPECIALIST
    is_active: bool = True
    reports_to: Optional[int] = None

    def __str__(self) -> str:
        status = "Active" if self.is_active else "Not-Active"
        reports_to = "null" if self.reports_to is None else str(self.reports_to)
        lines = [
            "------------------",
            f"Employee ID: {self.employee_id}",
            f"Personnel Code: {self.personnel_code}",
            f"Name: {self.name}",
            f"Hire Date: {self.hire_date}",
            f"Role: {role_to_string(self.role)}",
            f"Employee Status: {status}",
            f"ReportsTo: {reports_to}",
        ]
        return "\n".join(lines) + "\n"


@dataclass
class PerformanceReview:
    """One review of an employee's performance, with per-area ratings."""

    review_id: int = 0
    employee_id: int = 0
    reviewer_id: int = 0
    review_date: str = ""
    overall_rating: Optional[float] = None
    punctuality_rating: float = 0.0
    quality_of_work_rating: float = 0.0
    communication_rating: float = 0.0
    teamwork_rating: float = 0.0
    technical_skills_rating: float = 0.0
    problem_solving_rating: float = 0.0
    creativity_rating: float = 0.0
    adaptability_rating: float = 0.0
    leadership_rating: float = 0.0
    initiative_rating: float = 0.0
    comments: Optional[str] = None

    def __str__(self) -> str:
        lines = [
            f"Review ID : {self.review_id}",
            f"Date of Review : {self.review_date}",
        ]
        if self.overall_rating is not None:
            lines.append(f"Overall Rating : {_format_rating(self.overall_rating)}")
        ratings = [
            ("Punctuality Rating", self.punctuality_rating),
            ("Quality of Work", self.quality_of_work_rating),
            ("Communication Rating", self.communication_rating),
            ("Teamwork Rating", self.teamwork_rating),
            ("Technical Skill Rating", self.technical_skills_rating),
            ("Problem Solving", self.problem_solving_rating),
            ("Creativity Rating", self.creativity_rating),
            ("Adaptibility Rating", self.adaptability_rating),
            ("Leadership Rating", self.leadership_rating),
            ("Initiative Rating", self.initiative_rating),
        ]
        lines.extend(f"{label} : {_format_rating(value)}" for label, value in ratings)
        if self.comments is not None:
            lines.append("Comments : ")
            lines.append(self.comments)
        return "\n".join(lines) + "\n"


def _json_int(value: Any) -> int:
    """Read a JSON number as a whole int; anything else reads as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    else:
        return 0
    if _INT32_MIN <= number <= _INT32_MAX:
        return number
    return 0


def _json_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _json_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def employee_to_json(employee: Employee) -> dict[str, Any]:
    """Return the JSON object form of an employee."""
    data: dict[str, Any] = {
        "employeeId": employee.employee_id,
        "name": employee.name,
        "hireDate": employee.hire_date,
        "personnelCode": employee.personnel_code,
        "isActive": employee.is_active,
        "role": role_to_string(employee.role),
    }
    if employee.reports_to is not None:
        data["reportsTo"] = employee.reports_to
    return data


def json_to_employee(data: Mapping[str, Any]) -> Employee:
    """Build an employee from its JSON object form; missing fields take empty values."""
    reports_to = data.get("reportsTo")
    return Employee(
        employee_id=_json_int(data.get("employeeId")),
        personnel_code=_json_int(data.get("personnelCode")),
        name=_json_str(data.get("name")),
        hire_date=_json_str(data.get("hireDate")),
        role=string_to_role(_json_str(data.get("role"))) or Role.UNKNOWN,
        is_active=_json_bool(data.get("isActive")),
        reports_to=None if reports_to is None else _json_int(reports_to),
    )