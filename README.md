# perfmgmt

`perfmgmt` stores employees and their performance reviews in a local SQLite database. It is a library and has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Models

`perfmgmt.models` provides the following.

- `Role` is an enum with the members `MANAGER`, `BOSS`, `SPECIALIST`, `TECHNICIAN` and `UNKNOWN`.
- `FunctionTeams` is an enum with the members `HARDWARE`, `SOFTWARE`, `MECHANIC`, `ENGINEERING` and `PRODUCT`.
- `Employee` is a dataclass with these fields, in this order:
  - `employee_id`
  - `personnel_code`
  - `name`
  - `hire_date`
  - `role`, which defaults to `Role.SPECIALIST`
  - `is_active`, which defaults to `True`
  - `reports_to`, which defaults to `None`
- `PerformanceReview` is a dataclass with these fields:
  - ids for the review, the employee and the reviewer
  - `review_date`
  - an optional `overall_rating`
  - ten per-area ratings, such as `punctuality_rating` and `leadership_rating`
  - optional `comments`
- `role_to_string` and `string_to_role` convert roles to and from their names, such as `"Manager"` or `"Boss"`. `string_to_role` returns `None` for a name it does not know.
- `function_team_to_string` and `string_to_function_team` do the same for teams.
- `employee_to_json` turns an `Employee` into a JSON-ready dict with camelCase keys. It includes `reportsTo` only when that field is set.
- `json_to_employee` reads such a dict back. Missing or mistyped fields become empty values. An unrecognised role becomes `Role.UNKNOWN`.

Calling `str()` on an `Employee` or a `PerformanceReview` gives a readable multi-line summary.

## Database

`perfmgmt.database.DatabaseManager` opens or creates an SQLite file and creates the `employees` and `performance_reviews` tables if they are missing. You can use it as a context manager, or close it yourself with `close()`.

```python
from perfmgmt.database import DatabaseManager
from perfmgmt.models import Employee, PerformanceReview, Role

with DatabaseManager("staff.db") as db:
    db.add_employee(Employee(1, 20251207, "Ada Example", "20200101", Role.BOSS, True, None))
    db.add_employee(Employee(2, 20251208, "Bob Example", "20200101", Role.SPECIALIST, True, 1))

    boss = db.get_employee(1)
    everyone = db.get_all_employees()
    team = db.get_employees_reporting_to(1)
    db.deactivate_employee(2)

    review_id = db.add_performance_review(PerformanceReview(
        review_id=1, employee_id=2, reviewer_id=1, review_date="2025-04-27",
        overall_rating=9.5, punctuality_rating=9.0, quality_of_work_rating=8.5,
        communication_rating=8.0, teamwork_rating=9.0, technical_skills_rating=9.9,
        problem_solving_rating=10.0, creativity_rating=10.0, adaptability_rating=8.0,
        leadership_rating=7.0, initiative_rating=10.0, comments="Good work.",
    ))
    latest = db.get_performance_for_employee(2)
```

### Employees

- `add_employee` inserts an employee under its own `employee_id`.
- `get_employee` returns the employee with the given id, or `None` if there is none.
- `get_all_employees` returns every employee, ordered by id.
- `get_employees_reporting_to` returns every employee whose `reports_to` matches the given id, ordered by id.
- `update_employee` overwrites the stored record of an existing employee.
- `deactivate_employee` marks an existing employee as no longer active.

When an employee is read back, a stored role that is not recognised is read as `Role.SPECIALIST`.

### Reviews

- `add_performance_review` inserts a review and returns its id. If `review_date` is empty, today's date is stored instead.
- `get_performance_review` returns the review with the given id, or `None`.
- `get_performance_for_employee` returns the employee's most recent review by date, or `None`.

Each per-area rating must lie between 1 and 10. The default of `0.0` is rejected.

### Errors

Every failure raises `perfmgmt.database.DatabaseError`. This covers:

- a duplicate id,
- a rating out of range,
- an update or deactivation of an id that does not exist,
- a file that cannot be opened.

## What this package does not do

- There is no command-line program. The package is used only as a library.
- It has no network client. It does not talk to a remote server or synchronise with one.
- `employee_to_json` and `json_to_employee` only convert records. Sending them anywhere is up to the caller.