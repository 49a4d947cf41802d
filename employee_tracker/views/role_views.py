"""
Role Views: CLI functions for role management.
"""

from rich.console import Console
from sqlalchemy.orm import Session

import employee_tracker.controllers.role_controller as rc
from employee_tracker.controllers.department_controller import list_departments
from employee_tracker.views.choices import NoChoicesAvailable, build_choices
from employee_tracker.views.prompts import ask_salary, ask_text, confirm, select_choice
from employee_tracker.views.tables import display_table

console = Console()

ROLE_COLUMNS = [
    ("ID", "id"),
    ("Title", "title"),
    ("Department", "department"),
    ("Salary", "salary"),
]


def list_roles_cli(session: Session) -> None:
    """CLI interface to display every role with its department."""
    console.print("\n[bold blue]----- ROLE LIST ----- [/bold blue]")

    roles = rc.list_roles(session)

    if roles:
        display_table(roles, "Roles", ROLE_COLUMNS)
    else:
        console.print("[yellow]No roles found in the database.[/yellow]")


def create_role_cli(session: Session) -> None:
    """
    CLI interface to add a role.
    Needs at least one department; otherwise nothing is asked.
    """
    console.print("\n[bold green]----- ADD ROLE ----- [/bold green]")

    try:
        department_choices = build_choices(
            list_departments(session),
            label=lambda department: department.name,
            value=lambda department: department.id,
            required=True,
            empty_message="No departments found. Please add a department first.",
        )
    except NoChoicesAvailable as e:
        console.print(f"[bold yellow]INFO:[/bold yellow] {e.message}")
        return

    title = ask_text("Enter the title of the new role", "Role title")
    salary = ask_salary("Enter the salary for the new role")
    department_id = select_choice(
        department_choices, "Select the department for the new role:"
    )

    new_role = rc.create_role(session, title, salary, department_id)

    if new_role:
        console.print(f"\n[bold green]SUCCESS:[/bold green] Role '{new_role.title}' added.")
    else:
        console.print("\n[bold red]FAILURE:[/bold red] Role creation failed.")


def delete_role_cli(session: Session) -> None:
    """CLI interface to delete a role and the employees holding it."""
    console.print("\n[bold red]----- DELETE ROLE ----- [/bold red]")

    try:
        choices = build_choices(
            rc.list_roles(session),
            label=lambda role: role.title,
            value=lambda role: role.id,
            required=True,
            empty_message="No roles to delete.",
        )
    except NoChoicesAvailable as e:
        console.print(f"[bold yellow]INFO:[/bold yellow] {e.message}")
        return

    role_id = select_choice(choices, "Select the role to delete:")

    if not confirm(
        "Are you sure you want to delete this role? "
        "All associated employees will also be deleted."
    ):
        console.print("[bold yellow]Deletion cancelled.[/bold yellow]")
        return

    if rc.delete_role(session, role_id):
        console.print("\n[bold green]SUCCESS:[/bold green] Role deleted.")
    else:
        console.print(
            "\n[bold red]FAILURE:[/bold red] Deletion failed (check console for details)."
        )
