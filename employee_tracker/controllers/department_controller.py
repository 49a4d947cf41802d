"""
Department Controller: Handles all CRUD operations related to the Department model,
including the cascading delete and the department budget report.
"""

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from rich.console import Console

import sentry_sdk

from employee_tracker.models import Department, Employee, Role
from employee_tracker.controllers.employee_controller import remove_employees
from employee_tracker.controllers.utils import is_valid_name

console = Console()


# =============================================================================
# --- DEPARTMENTS CRUD ---
# =============================================================================


def list_departments(session: Session) -> list[Department]:
    """
    Retrieves all departments ordered by ID.
    """
    return session.query(Department).order_by(Department.id).all()


def create_department(session: Session, name: str) -> Department | None:
    """
    Creates a new department. The name is trimmed and must not be empty.
    """
    if not is_valid_name(name):
        console.print("[bold red]ERROR:[/bold red] Department name must be 1 to 30 characters long.")
        return None

    try:
        new_department = Department(name=name.strip())

        session.add(new_department)
        session.commit()

        sentry_sdk.capture_message(
            f"Department CREATED: {new_department.name} (ID: {new_department.id})",
            level="info",
        )

        return new_department

    except IntegrityError:
        session.rollback()
        sentry_sdk.capture_exception()
        console.print(
            f"[bold red]ERROR:[/bold red] A department named '{name.strip()}' already exists."
        )
        return None
    except SQLAlchemyError as e:
        session.rollback()
        sentry_sdk.capture_exception(e)
        console.print(f"[bold red]ERROR:[/bold red] Error adding department: {e}")
        return None


def delete_department(session: Session, department_id: int) -> bool:
    """
    Deletes a department together with its roles and the employees holding them.
    Children are removed before the parent in a single transaction, so the cascade
    holds even when the database does not enforce ON DELETE CASCADE.
    """
    department = session.query(Department).filter_by(id=department_id).one_or_none()

    if not department:
        console.print(
            f"[bold red]ERROR:[/bold red] Department with ID {department_id} not found."
        )
        return False

    department_name = department.name

    try:
        role_ids = [
            role_id
            for (role_id,) in session.query(Role.id)
            .filter(Role.department_id == department_id)
            .all()
        ]
        employee_ids = [
            employee_id
            for (employee_id,) in session.query(Employee.id)
            .filter(Employee.role_id.in_(role_ids))
            .all()
        ]

        remove_employees(session, employee_ids)
        session.query(Role).filter(Role.department_id == department_id).delete(
            synchronize_session=False
        )
        session.query(Department).filter(Department.id == department_id).delete(
            synchronize_session=False
        )
        session.commit()

        sentry_sdk.capture_message(
            f"Department DELETED: {department_name} (ID: {department_id}), "
            f"{len(role_ids)} role(s) and {len(employee_ids)} employee(s) removed.",
            level="info",
        )
        return True

    except SQLAlchemyError as e:
        session.rollback()
        sentry_sdk.capture_exception(e)
        console.print(f"[bold red]ERROR:[/bold red] Error deleting department: {e}")
        return False


# =============================================================================
# --- REPORTS ---
# =============================================================================


def department_budgets(session: Session) -> list:
    """
    Utilized budget per department: the sum of the salaries of every employee's role.
    Inner joins: departments without employees produce no row, and employees whose
    role has no department are left out.
    """
    return (
        session.query(
            Department.name.label("department"),
            func.sum(Role.salary).label("utilized_budget"),
        )
        .select_from(Employee)
        .join(Role, Employee.role_id == Role.id)
        .join(Department, Role.department_id == Department.id)
        .group_by(Department.id, Department.name)
        .order_by(Department.name)
        .all()
    )
