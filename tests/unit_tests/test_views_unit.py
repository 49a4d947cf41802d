# tests/unit_tests/test_views_unit.py
from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest
from sqlalchemy.orm import Session

from employee_tracker.views.department_views import (
    delete_department_cli,
    list_departments_cli,
)
from employee_tracker.views.employee_views import (
    create_employee_cli,
    delete_employee_cli,
    list_employees_by_manager_cli,
    update_employee_manager_cli,
    update_employee_role_cli,
)
from employee_tracker.views.role_views import create_role_cli, delete_role_cli

PROMPT = "employee_tracker.views.prompts.Prompt.ask"
CONFIRM = "employee_tracker.views.prompts.Confirm.ask"


@pytest.fixture
def mock_session():
    return Mock(spec=Session)


@pytest.fixture
def employees():
    return [
        SimpleNamespace(id=1, first_name="Ada", last_name="Lovelace"),
        SimpleNamespace(id=2, first_name="Grace", last_name="Hopper"),
    ]


@pytest.fixture
def departments():
    return [SimpleNamespace(id=1, name="Engineering")]


def test_create_role_without_departments_never_prompts(mock_session):
    with patch("employee_tracker.views.role_views.list_departments", return_value=[]), \
            patch("employee_tracker.controllers.role_controller.create_role") as mock_create, \
            patch(PROMPT) as mock_ask:
        create_role_cli(mock_session)
    mock_ask.assert_not_called()
    mock_create.assert_not_called()


def test_create_role_passes_validated_input(mock_session, departments):
    with patch("employee_tracker.views.role_views.list_departments", return_value=departments), \
            patch("employee_tracker.controllers.role_controller.create_role") as mock_create, \
            patch(PROMPT, side_effect=["  ", "Engineer", "-1", "90000", "1"]):
        create_role_cli(mock_session)
    args = mock_create.call_args.args
    assert args[0] is mock_session
    assert args[1] == "Engineer"
    assert str(args[2]) == "90000"
    assert args[3] == 1


def test_create_employee_without_roles_never_prompts(mock_session):
    with patch("employee_tracker.views.employee_views.list_roles", return_value=[]), \
            patch("employee_tracker.controllers.employee_controller.create_employee") as mock_create, \
            patch(PROMPT) as mock_ask:
        create_employee_cli(mock_session)
    mock_ask.assert_not_called()
    mock_create.assert_not_called()


def test_create_employee_with_no_manager(mock_session, employees):
    roles = [SimpleNamespace(id=5, title="Engineer")]
    with patch("employee_tracker.views.employee_views.list_roles", return_value=roles), \
            patch("employee_tracker.controllers.employee_controller.list_employees", return_value=employees), \
            patch("employee_tracker.controllers.employee_controller.create_employee") as mock_create, \
            patch(PROMPT, side_effect=["Alan", "Turing", "1", "1"]) as mock_ask:
        create_employee_cli(mock_session)
    mock_create.assert_called_once_with(mock_session, "Alan", "Turing", 5, None)
    # "None" plus the two existing employees
    assert mock_ask.call_args_list[-1].kwargs["choices"] == ["1", "2", "3"]


def test_update_employee_role_aborts_without_roles(mock_session, employees):
    with patch("employee_tracker.controllers.employee_controller.list_employees", return_value=employees), \
            patch("employee_tracker.views.employee_views.list_roles", return_value=[]), \
            patch("employee_tracker.controllers.employee_controller.update_employee_role") as mock_update, \
            patch(PROMPT) as mock_ask:
        update_employee_role_cli(mock_session)
    mock_ask.assert_not_called()
    mock_update.assert_not_called()


def test_update_employee_manager_excludes_selected_employee(mock_session, employees):
    with patch("employee_tracker.controllers.employee_controller.list_employees", return_value=employees), \
            patch("employee_tracker.controllers.employee_controller.update_employee_manager") as mock_update, \
            patch(PROMPT, side_effect=["1", "2"]) as mock_ask:
        update_employee_manager_cli(mock_session)
    # Candidates are "None" and Grace only.
    assert mock_ask.call_args_list[1].kwargs["choices"] == ["1", "2"]
    mock_update.assert_called_once_with(mock_session, 1, 2)


def test_update_employee_manager_without_employees(mock_session):
    with patch("employee_tracker.controllers.employee_controller.list_employees", return_value=[]), \
            patch("employee_tracker.controllers.employee_controller.update_employee_manager") as mock_update, \
            patch(PROMPT) as mock_ask:
        update_employee_manager_cli(mock_session)
    mock_ask.assert_not_called()
    mock_update.assert_not_called()


def test_list_employees_by_manager_without_managers(mock_session):
    with patch("employee_tracker.controllers.employee_controller.list_managers", return_value=[]), \
            patch(PROMPT) as mock_ask:
        list_employees_by_manager_cli(mock_session)
    mock_ask.assert_not_called()


def test_delete_department_declined(mock_session, departments):
    with patch("employee_tracker.controllers.department_controller.list_departments", return_value=departments), \
            patch("employee_tracker.controllers.department_controller.delete_department") as mock_delete, \
            patch(PROMPT, return_value="1"), \
            patch(CONFIRM, return_value=False):
        delete_department_cli(mock_session)
    mock_delete.assert_not_called()


def test_delete_department_confirmed(mock_session, departments):
    with patch("employee_tracker.controllers.department_controller.list_departments", return_value=departments), \
            patch("employee_tracker.controllers.department_controller.delete_department", return_value=True) as mock_delete, \
            patch(PROMPT, return_value="1"), \
            patch(CONFIRM, return_value=True):
        delete_department_cli(mock_session)
    mock_delete.assert_called_once_with(mock_session, 1)


def test_delete_role_declined(mock_session):
    roles = [SimpleNamespace(id=3, title="Engineer")]
    with patch("employee_tracker.controllers.role_controller.list_roles", return_value=roles), \
            patch("employee_tracker.controllers.role_controller.delete_role") as mock_delete, \
            patch(PROMPT, return_value="1"), \
            patch(CONFIRM, return_value=False):
        delete_role_cli(mock_session)
    mock_delete.assert_not_called()


def test_delete_employee_declined_touches_nothing(mock_session, employees):
    with patch("employee_tracker.controllers.employee_controller.list_employees", return_value=employees), \
            patch("employee_tracker.controllers.employee_controller.delete_employee") as mock_delete, \
            patch(PROMPT, return_value="2"), \
            patch(CONFIRM, return_value=False):
        delete_employee_cli(mock_session)
    mock_delete.assert_not_called()
    assert mock_session.method_calls == []


def test_delete_employee_without_employees(mock_session):
    with patch("employee_tracker.controllers.employee_controller.list_employees", return_value=[]), \
            patch("employee_tracker.controllers.employee_controller.delete_employee") as mock_delete, \
            patch(CONFIRM) as mock_confirm:
        delete_employee_cli(mock_session)
    mock_confirm.assert_not_called()
    mock_delete.assert_not_called()


def test_list_departments_empty(mock_session):
    with patch("employee_tracker.controllers.department_controller.list_departments", return_value=[]), \
            patch("employee_tracker.views.department_views.display_table") as mock_display:
        list_departments_cli(mock_session)
    mock_display.assert_not_called()
