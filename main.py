"""
This is the main script for the Employee Tracker command-line interface.
It loads the configuration, connects to the database once and hands the
session to the main menu until the user exits.
"""

import os
import sys

import sentry_sdk
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from rich.console import Console
from sqlalchemy.exc import SQLAlchemyError

from employee_tracker.database import (
    DOTENV_PATH,
    create_db_engine,
    get_session,
    load_environment,
)
from employee_tracker.views.main_menu import main_menu

console = Console()


def init_sentry():
    """Initializes Sentry SDK using DSN from environment variable (SENTRY_DSN)."""
    sentry_dsn = os.environ.get("SENTRY_DSN")

    if sentry_dsn:
        sentry_sdk.init(
            dsn=sentry_dsn,
            traces_sample_rate=1.0,
            environment=os.environ.get("SENTRY_ENVIRONMENT", "cli-prod"),
            integrations=[
                SqlalchemyIntegration(),
            ],
            send_default_pii=False,
        )
        console.print("[bold green]Sentry Initialized (DSN found).[/bold green]")
    else:
        console.print(
            "[bold yellow]Sentry DSN not found. Running without error logging. "
            "Check SENTRY_DSN environment variable.[/bold yellow]"
        )


def display_banner():
    console.print("***********************************", style="bold cyan")
    console.print("*                                 *", style="bold cyan")
    console.print("*        EMPLOYEE MANAGER         *", style="bold cyan")
    console.print("*                                 *", style="bold cyan")
    console.print("***********************************", style="bold cyan")


def fatal_exit(message: str, error: Exception):
    """Reports a startup or crash error and stops the process with status 1."""
    sentry_sdk.capture_exception(error)
    console.print(f"[bold red]{message}:[/bold red] {error}")
    sentry_sdk.flush(timeout=2.0)
    sys.exit(1)


def main():
    """Main entry point of the application."""
    if load_environment():
        console.print(
            f"[bold green]INFO:[/bold green] .env loaded successfully from {DOTENV_PATH}."
        )
    else:
        console.print(
            f"[bold yellow]WARNING:[/bold yellow] No .env file found at {DOTENV_PATH}. "
            "Using the current environment."
        )

    init_sentry()

    try:
        engine = create_db_engine()
    except (ValueError, SQLAlchemyError) as e:
        fatal_exit("Database connection error", e)

    console.print("[bold green]Connected to the database.[/bold green]")

    session = get_session(engine)
    display_banner()

    try:
        main_menu(session)
    except KeyboardInterrupt:
        session.close()
        console.print("\n[bold yellow]Goodbye![/bold yellow]")
    except Exception as e:
        session.close()
        fatal_exit("FATAL CRASH: Application encountered an unhandled error", e)
    finally:
        engine.dispose()
        sentry_sdk.flush(timeout=1.0)


if __name__ == "__main__":
    main()
