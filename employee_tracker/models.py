"""
Database Models for the Employee Tracker.

Defines the SQLAlchemy structure for Departments, Roles and Employees.
Roles belong to a department, employees hold a role and may report to another employee.
"""
from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


# --- DEPARTMENT ---
class Department(Base):
    """Represents a department of the company."""
    __tablename__ = "departments"
    id = Column(Integer, primary_key=True)
    name = Column(String(30), unique=True, nullable=False)

    roles = relationship("Role", back_populates="department", passive_deletes=True)

    def __repr__(self):
        return f"<Department(id={self.id}, name='{self.name}')>"


# --- ROLE ---
class Role(Base):
    """Represents a job title with its salary, attached to a department."""
    __tablename__ = "roles"
    id = Column(Integer, primary_key=True)
    title = Column(String(30), nullable=False)
    salary = Column(Numeric(10, 2), nullable=False)
    department_id = Column(
        Integer, ForeignKey("departments.id", ondelete="CASCADE"), nullable=True
    )

    # Relationships
    department = relationship("Department", back_populates="roles")
    employees = relationship("Employee", back_populates="role", passive_deletes=True)

    def __repr__(self):
        return f"<Role(id={self.id}, title='{self.title}', department_id={self.department_id})>"


# --- EMPLOYEE ---
class Employee(Base):
    """Represents an employee. manager_id points to another employee, never to itself."""
    __tablename__ = "employees"
    id = Column(Integer, primary_key=True)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)
    role_id = Column(Integer, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False)
    manager_id = Column(
        Integer, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    role = relationship("Role", back_populates="employees")
    manager = relationship(
        "Employee", remote_side=[id], back_populates="reports"
    )
    reports = relationship("Employee", back_populates="manager", passive_deletes=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Employee(id={self.id}, name='{self.full_name}', role_id={self.role_id})>"
