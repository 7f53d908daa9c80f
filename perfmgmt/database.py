"""SQLite storage for employees and performance reviews."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional

from perfmgmt.models import Employee, PerformanceReview, Role, role_to_string, string_to_role

_CREATE_EMPLOYEES = """
CREATE TABLE IF NOT EXISTS employees (
    employee_id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    role TEXT NOT NULL CHECK(role IN ('Manager', 'Boss', 'Specialist', 'Technician')),
    reports_to INT,
    hire_date TEXT,
    personnel_code INT,
    is_active INT DEFAULT 1,
    FOREIGN KEY (reports_to) REFERENCES employees(employee_id)
)
"""

_CREATE_REVIEWS = """
CREATE TABLE IF NOT EXISTS performance_reviews (
    review_id INTEGER PRIMARY KEY AUTOINCREMENT,
    employee_id INTEGER NOT NULL,
    reviewer_id INTEGER NOT NULL,
    review_date DATE NOT NULL DEFAULT CURRENT_DATE,
    overall_rating REAL,
    comments TEXT,
    punctuality_rating REAL CHECK(punctuality_rating BETWEEN 1 AND 10),
    quality_of_work_rating REAL CHECK(quality_of_work_rating BETWEEN 1 AND 10),
    teamwork_rating REAL CHECK(teamwork_rating BETWEEN 1 AND 10),
    communication_rating REAL CHECK(communication_rating BETWEEN 1 AND 10),
    problem_solving_rating REAL CHECK(problem_solving_rating BETWEEN 1 AND 10),
    creativity_rating REAL CHECK(creativity_rating BETWEEN 1 AND 10),
    technical_skills_rating REAL CHECK(technical_skills_rating BETWEEN 1 AND 10),
    adaptability_rating REAL CHECK(adaptability_rating BETWEEN 1 AND 10),
    leadership_rating REAL CHECK(leadership_rating BETWEEN 1 AND 10),
    initiative_rating REAL CHECK(initiative_rating BETWEEN 1 AND 10),
    FOREIGN KEY (employee_id) REFERENCES employees(employee_id),
    FOREIGN KEY (reviewer_id) REFERENCES employees(employee_id)
)
"""

_EMPLOYEE_COLUMNS = "employee_id, name, role, reports_to, hire_date, personnel_code, is_active"

_RATING_COLUMNS = (
    "punctuality_rating",
    "quality_of_work_rating",
    "communication_rating",
    "teamwork_rating",
    "technical_skills_rating",
    "problem_solving_rating",
    "creativity_rating",
    "adaptability_rating",
    "leadership_rating",
    "initiative_rating",
)

_REVIEW_COLUMNS = ", ".join(
    ("review_id", "employee_id", "reviewer_id", "review_date", "overall_rating", "comments")
    + _RATING_COLUMNS
)


class DatabaseError(Exception):
    """Raised when the database cannot carry out an operation."""


class DatabaseManager:
    """Keeps employees and their performance reviews in an SQLite file."""

    def __init__(self, db_path: str) -> None:
        try:
            self._conn = sqlite3.connect(db_path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Failed to open database: {exc}") from exc
        self._conn.row_factory = sqlite3.Row
        try:
            self.initialize_database()
        except DatabaseError:
            self._conn.close()
            raise

    @contextmanager
    def _guard(self, operation: str) -> Iterator[sqlite3.Connection]:
        try:
            with self._conn:
                yield self._conn
        except sqlite3.Error as exc:
            raise DatabaseError(f"[{operation}] Failed: {exc}") from exc

    def initialize_database(self) -> None:
        """Create the tables if they do not exist yet."""
        with self._guard("initialize_database") as conn:
            conn.execute(_CREATE_EMPLOYEES)
            conn.execute(_CREATE_REVIEWS)

    def close(self) -> None:
        """Close the connection."""
        self._conn.close()

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---- employees ----

    def add_employee(self, employee: Employee) -> None:
        """Insert an employee under its own id."""
        with self._guard("add_employee") as conn:
            conn.execute(
                f"INSERT INTO employees ({_EMPLOYEE_COLUMNS}) "
                "VALUES (:id, :name, :role, :reports_to, :hire_date, :personnel_code, :is_active)",
                self._employee_params(employee),
            )

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with the given id, or None."""
        with self._guard("get_employee") as conn:
            row = conn.execute(
                f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE employee_id = ?",
                (employee_id,),
            ).fetchone()
        return None if row is None else self._parse_employee(row)

    def get_all_employees(self) -> list[Employee]:
        """Return every employee, ordered by id."""
        with self._guard("get_all_employees") as conn:
            rows = conn.execute(
                f"SELECT {_EMPLOYEE_COLUMNS} FROM employees ORDER BY employee_id"
            ).fetchall()
        return [self._parse_employee(row) for row in rows]

    def get_employees_reporting_to(self, head_id: int) -> list[Employee]:
        """Return the employees who report to ``head_id``, ordered by id."""
        with self._guard("get_employees_reporting_to") as conn:
            rows = conn.execute(
                f"SELECT {_EMPLOYEE_COLUMNS} FROM employees "
                "WHERE reports_to = ? ORDER BY employee_id",
                (head_id,),
            ).fetchall()
        return [self._parse_employee(row) for row in rows]

    def update_employee(self, employee: Employee) -> None:
        """Overwrite the stored record of an existing employee."""
        with self._guard("update_employee") as conn:
            cursor = conn.execute(
                "UPDATE employees SET name = :name, role = :role, reports_to = :reports_to, "
                "hire_date = :hire_date, personnel_code = :personnel_code, is_active = :is_active "
                "WHERE employee_id = :id",
                self._employee_params(employee),
            )
            if cursor.rowcount == 0:
                raise DatabaseError(f"[update_employee] No employee with id {employee.employee_id}")

    def deactivate_employee(self, employee_id: int) -> None:
        """Mark an existing employee as no longer active."""
        with self._guard("deactivate_employee") as conn:
            cursor = conn.execute(
                "UPDATE employees SET is_active = 0 WHERE employee_id = ?", (employee_id,)
            )
            if cursor.rowcount == 0:
                raise DatabaseError(f"[deactivate_employee] No employee with id {employee_id}")

    # ---- performance reviews ----

    def add_performance_review(self, review: PerformanceReview) -> int:
        """Insert a review and return its id; an empty date becomes today's."""
        params = {
            "review_id": review.review_id,
            "employee_id": review.employee_id,
            "reviewer_id": review.reviewer_id,
            "review_date": review.review_date or None,
            "overall_rating": review.overall_rating,
            "comments": review.comments,
        }
        params.update({column: getattr(review, column) for column in _RATING_COLUMNS})
        placeholders = ", ".join(f":{column}" for column in _RATING_COLUMNS)
        with self._guard("add_performance_review") as conn:
            cursor = conn.execute(
                f"INSERT INTO performance_reviews ({_REVIEW_COLUMNS}) VALUES "
                ":review_id, :employee_id, :reviewer_id, COALESCE(:review_date, CURRENT_DATE), "
                f":overall_rating, :comments, {placeholders})".replace("VALUES :", "VALUES (:", 1),
                params,
            )
            return int(cursor.lastrowid)

    def get_performance_review(self, review_id: int) -> Optional[PerformanceReview]:
        """Return the review with the given id, or None."""
        with self._guard("get_performance_review") as conn:
            row = conn.execute(
                f"SELECT {_REVIEW_COLUMNS} FROM performance_reviews WHERE review_id = ?",
                (review_id,),
            ).fetchone()
        return None if row is None else self._parse_review(row)

    def get_performance_for_employee(self, employee_id: int) -> Optional[PerformanceReview]:
        """Return the most recent review of an employee, or None."""
        with self._guard("get_performance_for_employee") as conn:
            row = conn.execute(
                f"SELECT {_REVIEW_COLUMNS} FROM performance_reviews WHERE employee_id = ? "
                "ORDER BY review_date DESC, review_id DESC LIMIT 1",
                (employee_id,),
            ).fetchone()
        return None if row is None else self._parse_review(row)

    # ---- row conversion ----

    @staticmethod
    def _employee_params(employee: Employee) -> dict:
        return {
            "id": employee.employee_id,
            "name": employee.name,
            "role": role_to_string(employee.role),
            "reports_to": employee.reports_to,
            "hire_date": employee.hire_date,
            "personnel_code": employee.personnel_code,
            "is_active": 1 if employee.is_active else 0,
        }

    @staticmethod
    def _parse_employee(row: sqlite3.Row) -> Employee:
        return Employee(
            employee_id=int(row["employee_id"] or 0),
            personnel_code=int(row["personnel_code"] or 0),
            name=str(row["name"] or ""),
            hire_date=str(row["hire_date"] or ""),
            role=string_to_role(str(row["role"] or "")) or Role.SPECIALIST,
            is_active=bool(row["is_active"]),
            reports_to=None if row["reports_to"] is None else int(row["reports_to"]),
        )

    @staticmethod
    def _parse_review(row: sqlite3.Row) -> PerformanceReview:
        ratings = {column: float(row[column] or 0.0) for column in _RATING_COLUMNS}
        overall = row["overall_rating"]
        return PerformanceReview(
            review_id=int(row["review_id"]),
            employee_id=int(row["employee_id"]),
            reviewer_id=int(row["reviewer_id"]),
            review_date=str(row["review_date"] or ""),
            overall_rating=None if overall is None else float(overall),
            comments=row["comments"],
            **ratings,
        )