"""
Main menu interface (View layer).
Maps every menu entry to its CLI function and keeps prompting until the user exits.
"""

from enum import Enum
from typing import Callable

import sentry_sdk
from rich.console import Console
from rich.prompt import Prompt
from sqlalchemy.orm import Session

from .department_views import (
    create_department_cli,
    delete_department_cli,
    department_budgets_cli,
    list_departments_cli,
)
from .employee_views import (
    create_employee_cli,
    delete_employee_cli,
    list_employees_by_department_cli,
    list_employees_by_manager_cli,
    list_employees_cli,
    update_employee_manager_cli,
    update_employee_role_cli,
)
from .role_views import create_role_cli, delete_role_cli, list_roles_cli

console = Console()


class MenuAction(Enum):
    """Every action offered by the main menu, in display order."""

    VIEW_DEPARTMENTS = "View all departments"
    VIEW_ROLES = "View all roles"
    VIEW_EMPLOYEES = "View all employees"
    ADD_DEPARTMENT = "Add a department"
    ADD_ROLE = "Add a role"
    ADD_EMPLOYEE = "Add an employee"
    UPDATE_EMPLOYEE_ROLE = "Update an employee role"
    UPDATE_EMPLOYEE_MANAGER = "Update an employee manager"
    VIEW_EMPLOYEES_BY_DEPARTMENT = "View employees by department"
    VIEW_EMPLOYEES_BY_MANAGER = "View employees by manager"
    DELETE_DEPARTMENT = "Delete a department"
    DELETE_ROLE = "Delete a role"
    DELETE_EMPLOYEE = "Delete an employee"
    VIEW_DEPARTMENT_BUDGETS = "View department budgets"
    EXIT = "Exit"


def exit_cli(session: Session) -> None:
    """Closes the database session. The menu loop stops after this action."""
    session.close()
    console.print("\n[bold yellow]Goodbye![/bold yellow]")


ACTION_HANDLERS: dict[MenuAction, Callable[[Session], None]] = {
    MenuAction.VIEW_DEPARTMENTS: list_departments_cli,
    MenuAction.VIEW_ROLES: list_roles_cli,
    MenuAction.VIEW_EMPLOYEES: list_employees_cli,
    MenuAction.ADD_DEPARTMENT: create_department_cli,
    MenuAction.ADD_ROLE: create_role_cli,
    MenuAction.ADD_EMPLOYEE: create_employee_cli,
    MenuAction.UPDATE_EMPLOYEE_ROLE: update_employee_role_cli,
    MenuAction.UPDATE_EMPLOYEE_MANAGER: update_employee_manager_cli,
    MenuAction.VIEW_EMPLOYEES_BY_DEPARTMENT: list_employees_by_department_cli,
    MenuAction.VIEW_EMPLOYEES_BY_MANAGER: list_employees_by_manager_cli,
    MenuAction.DELETE_DEPARTMENT: delete_department_cli,
    MenuAction.DELETE_ROLE: delete_role_cli,
    MenuAction.DELETE_EMPLOYEE: delete_employee_cli,
    MenuAction.VIEW_DEPARTMENT_BUDGETS: department_budgets_cli,
    MenuAction.EXIT: exit_cli,
}

MENU_ACTIONS = list(MenuAction)


def display_main_menu() -> None:
    """
    Displays the numbered menu options.
    """
    console.print("\n" + "=" * 50, style="bold magenta")
    console.print("[bold magenta]EMPLOYEE MANAGER[/bold magenta] | What would you like to do?")
    console.print("=" * 50, style="bold magenta")

    for index, action in enumerate(MENU_ACTIONS, start=1):
        if action is MenuAction.EXIT:
            console.print("--------------------------------------")
            console.print(f"{index}. [bold red]{action.value}[/bold red]")
        else:
            console.print(f"{index}. {action.value}")

    console.print("=" * 50, style="bold magenta")


def prompt_action() -> MenuAction:
    """Asks for a menu number and returns the matching action."""
    keys = [str(index) for index in range(1, len(MENU_ACTIONS) + 1)]
    choice = Prompt.ask(f"Select an option [1-{len(MENU_ACTIONS)}]", choices=keys).strip()
    return MENU_ACTIONS[int(choice) - 1]


def run_action(session: Session, action: MenuAction) -> None:
    """
    Runs one handler. Whatever it raises is reported and swallowed here,
    so a failing action always returns to the menu.
    """
    try:
        ACTION_HANDLERS[action](session)
    except Exception as e:
        session.rollback()
        sentry_sdk.capture_exception(e)
        console.print(
            f"[bold red]ERROR while running '{action.value}':[/bold red] {e}"
        )


def main_menu(session: Session) -> None:
    """
    Main loop: display the menu, run the chosen action, repeat until Exit.
    """
    while True:
        display_main_menu()

        action = prompt_action()

        run_action(session, action)

        if action is MenuAction.EXIT:
            return
