"""
Role Controller: Handles all CRUD operations related to the Role model.
"""

from decimal import Decimal

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from rich.console import Console

import sentry_sdk

from employee_tracker.models import Department, Employee, Role
from employee_tracker.controllers.employee_controller import remove_employees
from employee_tracker.controllers.utils import is_valid_name, parse_salary

console = Console()


# =============================================================================
# --- ROLES CRUD ---
# =============================================================================


def list_roles(session: Session) -> list:
    """
    Retrieves all roles with their department name.
    Left join: a role without a department is still listed.
    """
    return (
        session.query(
            Role.id,
            Role.title,
            Department.name.label("department"),
            Role.salary,
        )
        .outerjoin(Department, Role.department_id == Department.id)
        .order_by(Role.id)
        .all()
    )


def create_role(
    session: Session, title: str, salary: Decimal, department_id: int
) -> Role | None:
    """
    Creates a new role in an existing department.
    """
    if not is_valid_name(title):
        console.print("[bold red]ERROR:[/bold red] Role title must be 1 to 30 characters long.")
        return None

    valid_salary = parse_salary(salary)
    if valid_salary is None:
        console.print(
            "[bold red]ERROR:[/bold red] Salary must be a valid positive number."
        )
        return None

    department = session.query(Department).filter_by(id=department_id).one_or_none()
    if not department:
        console.print(
            f"[bold red]ERROR:[/bold red] Department with ID {department_id} not found."
        )
        return None

    try:
        new_role = Role(
            title=title.strip(),
            salary=valid_salary,
            department_id=department_id,
        )

        session.add(new_role)
        session.commit()

        sentry_sdk.capture_message(
            f"Role CREATED: {new_role.title} (ID: {new_role.id}) "
            f"in department ID {department_id}",
            level="info",
        )

        return new_role

    except IntegrityError:
        session.rollback()
        sentry_sdk.capture_exception()
        console.print(
            "[bold red]ERROR:[/bold red] Database integrity error while adding the role."
        )
        return None
    except SQLAlchemyError as e:
        session.rollback()
        sentry_sdk.capture_exception(e)
        console.print(f"[bold red]ERROR:[/bold red] Error adding role: {e}")
        return None


def delete_role(session: Session, role_id: int) -> bool:
    """
    Deletes a role and every employee holding it. Other roles are untouched.
    """
    role = session.query(Role).filter_by(id=role_id).one_or_none()

    if not role:
        console.print(f"[bold red]ERROR:[/bold red] Role with ID {role_id} not found.")
        return False

    role_title = role.title

    try:
        employee_ids = [
            employee_id
            for (employee_id,) in session.query(Employee.id)
            .filter(Employee.role_id == role_id)
            .all()
        ]

        remove_employees(session, employee_ids)
        session.query(Role).filter(Role.id == role_id).delete(synchronize_session=False)
        session.commit()

        sentry_sdk.capture_message(
            f"Role DELETED: {role_title} (ID: {role_id}), "
            f"{len(employee_ids)} employee(s) removed.",
            level="info",
        )
        return True

    except SQLAlchemyError as e:
        session.rollback()
        sentry_sdk.capture_exception(e)
        console.print(f"[bold red]ERROR:[/bold red] Error deleting role: {e}")
        return False
