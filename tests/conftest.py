# tests/conftest.py
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from employee_tracker.models import Base, Department, Employee, Role


@pytest.fixture
def test_engine():
    # A fresh in-memory database per test, so primary keys always start at 1.
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session(test_engine):
    Session = sessionmaker(bind=test_engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def engineering(test_session):
    department = Department(name="Engineering")
    test_session.add(department)
    test_session.commit()
    return department


@pytest.fixture
def legal(test_session):
    department = Department(name="Legal")
    test_session.add(department)
    test_session.commit()
    return department


@pytest.fixture
def engineer_role(test_session, engineering):
    role = Role(title="Engineer", salary=Decimal("90000"), department_id=engineering.id)
    test_session.add(role)
    test_session.commit()
    return role


@pytest.fixture
def lawyer_role(test_session, legal):
    role = Role(title="Lawyer", salary=Decimal("150000"), department_id=legal.id)
    test_session.add(role)
    test_session.commit()
    return role


@pytest.fixture
def ada(test_session, engineer_role):
    employee = Employee(first_name="Ada", last_name="Lovelace", role_id=engineer_role.id)
    test_session.add(employee)
    test_session.commit()
    return employee


@pytest.fixture
def grace(test_session, engineer_role, ada):
    employee = Employee(
        first_name="Grace",
        last_name="Hopper",
        role_id=engineer_role.id,
        manager_id=ada.id,
    )
    test_session.add(employee)
    test_session.commit()
    return employee
