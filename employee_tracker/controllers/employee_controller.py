"""
Employee Controller: Handles all CRUD operations related to the Employee model.
These functions are called by the employee views of the main menu.
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session, aliased
from rich.console import Console

import sentry_sdk

from employee_tracker.models import Department, Employee, Role
from employee_tracker.controllers.utils import is_valid_name

console = Console()

Manager = aliased(Employee)


# --- Utility Functions ---


def _employee_details_query(session: Session) -> Query:
    """
    Employees with their role, department and manager name.
    Every join is a left join so incomplete rows are still shown.
    """
    return (
        session.query(
            Employee.id,
            Employee.first_name,
            Employee.last_name,
            Role.title,
            Department.name.label("department"),
            Role.salary,
            (Manager.first_name + " " + Manager.last_name).label("manager"),
        )
        .outerjoin(Role, Employee.role_id == Role.id)
        .outerjoin(Department, Role.department_id == Department.id)
        .outerjoin(Manager, Employee.manager_id == Manager.id)
    )


def remove_employees(session: Session, employee_ids: list[int]) -> None:
    """
    Deletes the given employees without committing.
    Employees reporting to one of them lose their manager (ON DELETE SET NULL).
    """
    if not employee_ids:
        return

    session.query(Employee).filter(Employee.manager_id.in_(employee_ids)).update(
        {Employee.manager_id: None}, synchronize_session=False
    )
    session.query(Employee).filter(Employee.id.in_(employee_ids)).delete(
        synchronize_session=False
    )


# =============================================================================
# --- EMPLOYEES READ ---
# =============================================================================


def list_employees(session: Session) -> list:
    """
    Retrieves every employee with title, department, salary and manager name.
    """
    return _employee_details_query(session).order_by(Employee.id).all()


def list_employees_by_department(session: Session, department_id: int) -> list:
    """
    Retrieves the employees whose role belongs to the given department.
    """
    return (
        _employee_details_query(session)
        .filter(Department.id == department_id)
        .order_by(Employee.id)
        .all()
    )


def list_managers(session: Session) -> list:
    """
    Retrieves the employees that manage at least one other employee.
    """
    return (
        session.query(Manager.id, Manager.first_name, Manager.last_name)
        .join(Employee, Employee.manager_id == Manager.id)
        .distinct()
        .order_by(Manager.id)
        .all()
    )


def list_employees_by_manager(session: Session, manager_id: int) -> list:
    """
    Retrieves the direct reports of the given manager.
    """
    return (
        _employee_details_query(session)
        .filter(Employee.manager_id == manager_id)
        .order_by(Employee.id)
        .all()
    )


# =============================================================================
# --- EMPLOYEES CRUD ---
# =============================================================================


def create_employee(
    session: Session,
    first_name: str,
    last_name: str,
    role_id: int,
    manager_id: int | None = None,
) -> Employee | None:
    """
    Creates a new employee holding an existing role, with an optional manager.
    """
    if not is_valid_name(first_name) or not is_valid_name(last_name):
        console.print("[bold red]ERROR:[/bold red] First and last name must be 1 to 30 characters long.")
        return None

    role = session.query(Role).filter_by(id=role_id).one_or_none()
    if not role:
        console.print(f"[bold red]ERROR:[/bold red] Role with ID {role_id} not found.")
        return None

    if manager_id is not None:
        manager = session.query(Employee).filter_by(id=manager_id).one_or_none()
        if not manager:
            console.print(
                f"[bold red]ERROR:[/bold red] Manager with ID {manager_id} not found."
            )
            return None

    try:
        new_employee = Employee(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            role_id=role_id,
            manager_id=manager_id,
        )

        session.add(new_employee)
        session.commit()

        sentry_sdk.capture_message(
            f"Employee CREATED: {new_employee.full_name} "
            f"(ID: {new_employee.id}) with role ID {role_id}",
            level="info",
        )

        return new_employee

    except IntegrityError:
        session.rollback()
        sentry_sdk.capture_exception()
        console.print(
            "[bold red]ERROR:[/bold red] Database integrity error while adding the employee."
        )
        return None
    except SQLAlchemyError as e:
        session.rollback()
        sentry_sdk.capture_exception(e)
        console.print(f"[bold red]ERROR:[/bold red] Error adding employee: {e}")
        return None


def update_employee_role(
    session: Session, employee_id: int, role_id: int
) -> Employee | None:
    """
    Moves an employee to another existing role.
    """
    employee = session.query(Employee).filter_by(id=employee_id).one_or_none()
    if not employee:
        console.print(
            f"[bold red]ERROR:[/bold red] Employee with ID {employee_id} not found."
        )
        return None

    role = session.query(Role).filter_by(id=role_id).one_or_none()
    if not role:
        console.print(f"[bold red]ERROR:[/bold red] Role with ID {role_id} not found.")
        return None

    try:
        employee.role_id = role_id
        session.commit()

        sentry_sdk.capture_message(
            f"Employee UPDATED: {employee.full_name} (ID: {employee.id}). "
            f"New role ID: {role_id}.",
            level="info",
        )
        return employee

    except SQLAlchemyError as e:
        session.rollback()
        sentry_sdk.capture_exception(e)
        console.print(f"[bold red]ERROR:[/bold red] Error updating employee role: {e}")
        return None


def update_employee_manager(
    session: Session, employee_id: int, manager_id: int | None
) -> Employee | None:
    """
    Sets (or clears, with None) the manager of an employee.
    An employee can never be its own manager; that case is rejected
    before any database access.
    """
    if manager_id is not None and manager_id == employee_id:
        console.print("[bold red]ERROR:[/bold red] An employee cannot manage themselves.")
        return None

    employee = session.query(Employee).filter_by(id=employee_id).one_or_none()
    if not employee:
        console.print(
            f"[bold red]ERROR:[/bold red] Employee with ID {employee_id} not found."
        )
        return None

    if manager_id is not None:
        manager = session.query(Employee).filter_by(id=manager_id).one_or_none()
        if not manager:
            console.print(
                f"[bold red]ERROR:[/bold red] Manager with ID {manager_id} not found."
            )
            return None

    try:
        employee.manager_id = manager_id
        session.commit()

        sentry_sdk.capture_message(
            f"Employee UPDATED: {employee.full_name} (ID: {employee.id}). "
            f"New manager ID: {manager_id}.",
            level="info",
        )
        return employee

    except SQLAlchemyError as e:
        session.rollback()
        sentry_sdk.capture_exception(e)
        console.print(
            f"[bold red]ERROR:[/bold red] Error updating employee manager: {e}"
        )
        return None


def delete_employee(session: Session, employee_id: int) -> bool:
    """
    Deletes an Employee record. Nothing else is deleted; its direct reports
    are kept without a manager.
    """
    employee = session.query(Employee).filter_by(id=employee_id).one_or_none()

    if not employee:
        console.print(
            f"[bold red]ERROR:[/bold red] Employee with ID {employee_id} not found."
        )
        return False

    full_name = employee.full_name

    try:
        remove_employees(session, [employee_id])
        session.commit()

        sentry_sdk.capture_message(
            f"Employee DELETED: {full_name} (ID: {employee_id})",
            level="info",
        )
        return True

    except SQLAlchemyError as e:
        session.rollback()
        sentry_sdk.capture_exception(e)
        console.print(
            f"[bold red]ERROR:[/bold red] Failed to delete employee. Details: {e}"
        )
        return False
