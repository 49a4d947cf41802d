"""
Employee Views: Handles all user interface (CLI) interactions for Employee operations.
It calls the business logic functions from the controller layer.
"""

from rich.console import Console
from sqlalchemy.orm import Session

import employee_tracker.controllers.employee_controller as ec
from employee_tracker.controllers.department_controller import list_departments
from employee_tracker.controllers.role_controller import list_roles
from employee_tracker.views.choices import (
    NoChoicesAvailable,
    build_choices,
    employee_label,
)
from employee_tracker.views.prompts import ask_text, confirm, select_choice
from employee_tracker.views.tables import display_table

console = Console()

EMPLOYEE_COLUMNS = [
    ("ID", "id"),
    ("First Name", "first_name"),
    ("Last Name", "last_name"),
    ("Title", "title"),
    ("Department", "department"),
    ("Salary", "salary"),
    ("Manager", "manager"),
]

# The department is implied when filtering by department.
DEPARTMENT_EMPLOYEE_COLUMNS = [
    column for column in EMPLOYEE_COLUMNS if column[1] != "department"
]
MANAGER_EMPLOYEE_COLUMNS = [
    column for column in EMPLOYEE_COLUMNS if column[1] != "manager"
]


# --- Choice helpers ---


def _employee_choices(rows, **kwargs):
    return build_choices(
        rows, label=employee_label, value=lambda employee: employee.id, **kwargs
    )


def _role_choices(rows, **kwargs):
    return build_choices(
        rows, label=lambda role: role.title, value=lambda role: role.id, **kwargs
    )


# --- CLI Functions (Interface Layer) ---


def list_employees_cli(session: Session) -> None:
    """
    CLI interface to display the list of all employees.
    """
    console.print("\n[bold blue]----- EMPLOYEE LIST ----- [/bold blue]")

    employees = ec.list_employees(session)

    if employees:
        display_table(employees, "Employees", EMPLOYEE_COLUMNS)
    else:
        console.print("[yellow]No employees found in the database.[/yellow]")


def create_employee_cli(session: Session) -> None:
    """
    CLI interface to add an employee.
    Needs at least one role; the manager is optional.
    """
    console.print("\n[bold green]----- ADD EMPLOYEE ----- [/bold green]")

    try:
        role_choices = _role_choices(
            list_roles(session),
            required=True,
            empty_message="No roles found. Please add a role first.",
        )
    except NoChoicesAvailable as e:
        console.print(f"[bold yellow]INFO:[/bold yellow] {e.message}")
        return

    manager_choices = _employee_choices(ec.list_employees(session), include_none=True)

    first_name = ask_text("Enter the employee's first name", "First name")
    last_name = ask_text("Enter the employee's last name", "Last name")
    role_id = select_choice(role_choices, "Select the employee's role:")
    manager_id = select_choice(manager_choices, "Select the employee's manager:")

    new_employee = ec.create_employee(session, first_name, last_name, role_id, manager_id)

    if new_employee:
        console.print(
            f"\n[bold green]SUCCESS:[/bold green] Employee '{new_employee.full_name}' added."
        )
    else:
        console.print("\n[bold red]FAILURE:[/bold red] Employee creation failed.")


def update_employee_role_cli(session: Session) -> None:
    """
    CLI interface to give an employee another role.
    """
    console.print("\n[bold yellow]----- UPDATE EMPLOYEE ROLE ----- [/bold yellow]")

    try:
        employee_choices = _employee_choices(
            ec.list_employees(session),
            required=True,
            empty_message="No employees found.",
        )
        role_choices = _role_choices(
            list_roles(session),
            required=True,
            empty_message="No roles found. Please add a role first.",
        )
    except NoChoicesAvailable as e:
        console.print(f"[bold yellow]INFO:[/bold yellow] {e.message}")
        return

    employee_id = select_choice(
        employee_choices, "Select the employee whose role you want to update:"
    )
    role_id = select_choice(role_choices, "Select the new role:")

    if ec.update_employee_role(session, employee_id, role_id):
        console.print("\n[bold green]SUCCESS:[/bold green] Employee role updated.")
    else:
        console.print("\n[bold red]FAILURE:[/bold red] Employee role update failed.")


def update_employee_manager_cli(session: Session) -> None:
    """
    CLI interface to change (or remove) an employee's manager.
    The selected employee is left out of the manager candidates.
    """
    console.print("\n[bold yellow]----- UPDATE EMPLOYEE MANAGER ----- [/bold yellow]")

    employees = ec.list_employees(session)

    try:
        employee_choices = _employee_choices(
            employees, required=True, empty_message="No employees found."
        )
    except NoChoicesAvailable as e:
        console.print(f"[bold yellow]INFO:[/bold yellow] {e.message}")
        return

    employee_id = select_choice(
        employee_choices, "Select the employee whose manager you want to update:"
    )

    candidates = [employee for employee in employees if employee.id != employee_id]
    manager_choices = _employee_choices(candidates, include_none=True)
    manager_id = select_choice(manager_choices, "Select the new manager:")

    if ec.update_employee_manager(session, employee_id, manager_id):
        console.print("\n[bold green]SUCCESS:[/bold green] Employee manager updated.")
    else:
        console.print("\n[bold red]FAILURE:[/bold red] Employee manager update failed.")


def list_employees_by_department_cli(session: Session) -> None:
    """CLI interface to display the employees of one department."""
    console.print("\n[bold blue]----- EMPLOYEES BY DEPARTMENT ----- [/bold blue]")

    try:
        department_choices = build_choices(
            list_departments(session),
            label=lambda department: department.name,
            value=lambda department: department.id,
            required=True,
            empty_message="No departments found.",
        )
    except NoChoicesAvailable as e:
        console.print(f"[bold yellow]INFO:[/bold yellow] {e.message}")
        return

    department_id = select_choice(
        department_choices, "Select the department to view its employees:"
    )

    employees = ec.list_employees_by_department(session, department_id)

    if employees:
        display_table(employees, "Employees by Department", DEPARTMENT_EMPLOYEE_COLUMNS)
    else:
        console.print("[yellow]No employees found in this department.[/yellow]")


def list_employees_by_manager_cli(session: Session) -> None:
    """CLI interface to display the direct reports of one manager."""
    console.print("\n[bold blue]----- EMPLOYEES BY MANAGER ----- [/bold blue]")

    try:
        manager_choices = _employee_choices(
            ec.list_managers(session),
            required=True,
            empty_message="No managers found.",
        )
    except NoChoicesAvailable as e:
        console.print(f"[bold yellow]INFO:[/bold yellow] {e.message}")
        return

    manager_id = select_choice(
        manager_choices, "Select the manager to view their employees:"
    )

    employees = ec.list_employees_by_manager(session, manager_id)

    if employees:
        display_table(employees, "Employees by Manager", MANAGER_EMPLOYEE_COLUMNS)
    else:
        console.print("[yellow]No employees found under this manager.[/yellow]")


def delete_employee_cli(session: Session) -> None:
    """
    CLI interface to delete an employee.
    """
    console.print("\n[bold red]----- DELETE EMPLOYEE ----- [/bold red]")

    try:
        choices = _employee_choices(
            ec.list_employees(session),
            required=True,
            empty_message="No employees to delete.",
        )
    except NoChoicesAvailable as e:
        console.print(f"[bold yellow]INFO:[/bold yellow] {e.message}")
        return

    employee_id = select_choice(choices, "Select the employee to delete:")

    if not confirm("Are you sure you want to delete this employee?"):
        console.print("[bold yellow]Deletion cancelled.[/bold yellow]")
        return

    if ec.delete_employee(session, employee_id):
        console.print("\n[bold green]SUCCESS:[/bold green] Employee deleted.")
    else:
        console.print(
            "\n[bold red]FAILURE:[/bold red] Deletion failed (check console for details)."
        )
