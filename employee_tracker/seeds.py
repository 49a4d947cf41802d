"""
Inserts a small sample dataset into an empty database.
This is a utility script and not part of the main menu:

    python -m employee_tracker.seeds
"""

import sys
from decimal import Decimal

from rich.console import Console
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from employee_tracker.models import Department, Employee, Role

console = Console()

SAMPLE_DEPARTMENTS = ["Engineering", "Finance", "Legal", "Sales"]

# (title, salary, department)
SAMPLE_ROLES = [
    ("Software Engineer", Decimal("120000"), "Engineering"),
    ("Lead Engineer", Decimal("150000"), "Engineering"),
    ("Accountant", Decimal("125000"), "Finance"),
    ("Legal Team Lead", Decimal("250000"), "Legal"),
    ("Lawyer", Decimal("190000"), "Legal"),
    ("Sales Lead", Decimal("100000"), "Sales"),
    ("Salesperson", Decimal("80000"), "Sales"),
]

# (first name, last name, role title, manager full name)
SAMPLE_EMPLOYEES = [
    ("John", "Doe", "Sales Lead", None),
    ("Mike", "Chan", "Salesperson", "John Doe"),
    ("Ashley", "Rodriguez", "Lead Engineer", None),
    ("Kevin", "Tupik", "Software Engineer", "Ashley Rodriguez"),
    ("Malia", "Brown", "Accountant", None),
    ("Sarah", "Lourd", "Legal Team Lead", None),
    ("Tom", "Allen", "Lawyer", "Sarah Lourd"),
]


def seed_database(session: Session) -> bool:
    """
    Adds the sample departments, roles and employees.
    Does nothing (and returns False) if the database already has departments.
    """
    if session.query(Department).first():
        console.print(
            "[bold yellow]INFO:[/bold yellow] Database already contains data. Seeding skipped."
        )
        return False

    departments = {name: Department(name=name) for name in SAMPLE_DEPARTMENTS}
    session.add_all(departments.values())

    roles = {
        title: Role(title=title, salary=salary, department=departments[department])
        for title, salary, department in SAMPLE_ROLES
    }
    session.add_all(roles.values())

    employees = {}
    for first_name, last_name, title, manager_name in SAMPLE_EMPLOYEES:
        employee = Employee(
            first_name=first_name,
            last_name=last_name,
            role=roles[title],
            manager=employees.get(manager_name),
        )
        employees[employee.full_name] = employee
    session.add_all(employees.values())

    session.commit()
    console.print(
        f"[bold green]Sample data created: {len(departments)} departments, "
        f"{len(roles)} roles, {len(employees)} employees.[/bold green]"
    )
    return True


if __name__ == "__main__":
    from employee_tracker.database import create_db_engine, get_session, load_environment

    load_environment()
    try:
        seed_session = get_session(create_db_engine())
    except (ValueError, SQLAlchemyError) as e:
        console.print(f"[bold red]ERROR:[/bold red] Cannot connect to the database: {e}")
        sys.exit(1)

    try:
        seed_database(seed_session)
    except SQLAlchemyError as e:
        seed_session.rollback()
        console.print(f"[bold red]ERROR:[/bold red] Seeding failed: {e}")
        sys.exit(1)
    finally:
        seed_session.close()
