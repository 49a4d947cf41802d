"""
Department Views: Handles all user interface (CLI) interactions for Department operations.
It calls the business logic functions from the controller layer.
"""

from rich.console import Console
from sqlalchemy.orm import Session

import employee_tracker.controllers.department_controller as dc
from employee_tracker.views.choices import NoChoicesAvailable, build_choices
from employee_tracker.views.prompts import ask_text, confirm, select_choice
from employee_tracker.views.tables import display_table

console = Console()

DEPARTMENT_COLUMNS = [("ID", "id"), ("Name", "name")]
BUDGET_COLUMNS = [("Department", "department"), ("Utilized Budget", "utilized_budget")]


def list_departments_cli(session: Session) -> None:
    """CLI interface to display every department."""
    console.print("\n[bold blue]----- DEPARTMENT LIST ----- [/bold blue]")

    departments = dc.list_departments(session)

    if departments:
        display_table(departments, "Departments", DEPARTMENT_COLUMNS)
    else:
        console.print("[yellow]No departments found in the database.[/yellow]")


def create_department_cli(session: Session) -> None:
    """CLI interface to add a department."""
    console.print("\n[bold green]----- ADD DEPARTMENT ----- [/bold green]")

    name = ask_text("Enter the name of the new department", "Department name")

    new_department = dc.create_department(session, name)

    if new_department:
        console.print(
            f"\n[bold green]SUCCESS:[/bold green] Department '{new_department.name}' added."
        )
    else:
        console.print("\n[bold red]FAILURE:[/bold red] Department creation failed.")


def delete_department_cli(session: Session) -> None:
    """
    CLI interface to delete a department.
    Its roles and their employees are deleted too, so the user has to confirm.
    """
    console.print("\n[bold red]----- DELETE DEPARTMENT ----- [/bold red]")

    try:
        choices = build_choices(
            dc.list_departments(session),
            label=lambda department: department.name,
            value=lambda department: department.id,
            required=True,
            empty_message="No departments to delete.",
        )
    except NoChoicesAvailable as e:
        console.print(f"[bold yellow]INFO:[/bold yellow] {e.message}")
        return

    department_id = select_choice(choices, "Select the department to delete:")

    if not confirm(
        "Are you sure you want to delete this department? "
        "All associated roles and employees will also be deleted."
    ):
        console.print("[bold yellow]Deletion cancelled.[/bold yellow]")
        return

    if dc.delete_department(session, department_id):
        console.print("\n[bold green]SUCCESS:[/bold green] Department deleted.")
    else:
        console.print(
            "\n[bold red]FAILURE:[/bold red] Deletion failed (check console for details)."
        )


def department_budgets_cli(session: Session) -> None:
    """CLI interface to display the utilized budget of each department."""
    console.print("\n[bold blue]----- DEPARTMENT BUDGETS ----- [/bold blue]")

    budgets = dc.department_budgets(session)

    if budgets:
        display_table(budgets, "Department Budgets", BUDGET_COLUMNS)
    else:
        console.print("[yellow]No department has employees yet.[/yellow]")
