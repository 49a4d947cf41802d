"""
Prompt helpers shared by every view: validated text, salary, single-select and confirm.
"""

from decimal import Decimal

from rich.console import Console
from rich.prompt import Confirm, Prompt

from employee_tracker.controllers.utils import MAX_NAME_LENGTH, MAX_SALARY, parse_salary
from employee_tracker.views.choices import Choice

console = Console()


def ask_text(message: str, field_name: str) -> str:
    """Asks until the answer is neither blank nor too long. Returns the trimmed answer."""
    while True:
        answer = (Prompt.ask(message) or "").strip()
        if not answer:
            console.print(f"[bold red]{field_name} cannot be empty.[/bold red]")
        elif len(answer) > MAX_NAME_LENGTH:
            console.print(
                f"[bold red]{field_name} cannot be longer than {MAX_NAME_LENGTH} characters.[/bold red]"
            )
        else:
            return answer


def ask_salary(message: str) -> Decimal:
    """Asks until the answer is a positive amount that fits the salary column."""
    while True:
        salary = parse_salary(Prompt.ask(message))
        if salary is not None:
            return salary
        console.print(
            f"[bold red]Please enter a positive number of at least 0.01 and at most {MAX_SALARY}.[/bold red]"
        )


def select_choice(choices: list[Choice], message: str):
    """
    Displays the numbered choices and returns the value of the selected one.
    """
    console.print(f"\n[bold yellow]{message}[/bold yellow]")

    options_list = [
        f"  [cyan]{index}[/cyan]: {choice.label}"
        for index, choice in enumerate(choices, start=1)
    ]
    console.print("\n".join(options_list))

    keys = [str(index) for index in range(1, len(choices) + 1)]
    key = Prompt.ask(f"Enter a number [1-{len(choices)}]", choices=keys).strip()

    return choices[int(key) - 1].value


def confirm(message: str) -> bool:
    """Yes/no question, 'no' unless the user explicitly agrees."""
    return Confirm.ask(f"[bold red]{message}[/bold red]", default=False)
