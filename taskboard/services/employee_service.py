# taskboard/services/employee_service.py
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.exceptions import EmailAlreadyExistsError, ResourceNotFoundError
from taskboard.models.employee import Employee
from taskboard.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut

logger = logging.getLogger(__name__)


def to_employee_out(employee: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=employee.id,
        name=employee.name,
        email=employee.email,
        department=employee.department,
        position=employee.position,
        phone_number=employee.phone_number,
        status=employee.status,
        created_at=employee.created_at,
        updated_at=employee.updated_at,
    )


class EmployeeService:
    @staticmethod
    def list_employees(db: Session) -> List[Employee]:
        employees = db.query(Employee).order_by(Employee.id).all()
        logger.info(f"Found {len(employees)} employees")
        return employees

    @staticmethod
    def get_employee(db: Session, employee_id: int) -> Employee:
        employee = db.query(Employee).filter(Employee.id == employee_id).first()
        if employee is None:
            logger.error(f"Employee not found with id: {employee_id}")
            raise ResourceNotFoundError(f"Employee not found with id: {employee_id}")
        return employee

    @staticmethod
    def _email_taken(db: Session, email: str) -> bool:
        return db.query(Employee).filter(Employee.email == email).first() is not None

    @staticmethod
    def create_employee(db: Session, employee_in: EmployeeCreate) -> Employee:
        logger.info(f"Creating new employee with email: {employee_in.email}")
        if EmployeeService._email_taken(db, employee_in.email):
            logger.error(f"Employee already exists with email: {employee_in.email}")
            raise EmailAlreadyExistsError(f"Employee already exists with email: {employee_in.email}")

        employee = Employee(
            name=employee_in.name,
            email=employee_in.email,
            department=employee_in.department,
            position=employee_in.position,
            phone_number=employee_in.phone_number,
            status=employee_in.status,
        )
        try:
            db.add(employee)
            db.commit()
            db.refresh(employee)
        except IntegrityError:
            db.rollback()
            logger.error(f"Employee already exists with email: {employee_in.email}")
            raise EmailAlreadyExistsError(f"Employee already exists with email: {employee_in.email}")
        except Exception:
            db.rollback()
            raise

        logger.info(f"Employee created successfully with id: {employee.id} and name: {employee.name}")
        return employee

    @staticmethod
    def update_employee(db: Session, employee_id: int, employee_in: EmployeeUpdate) -> Employee:
        logger.info(f"Updating employee with id: {employee_id}")
        employee = EmployeeService.get_employee(db, employee_id)

        update_data = employee_in.model_dump(exclude_unset=True)
        new_email = update_data.get("email")
        if new_email and new_email != employee.email and EmployeeService._email_taken(db, new_email):
            logger.error(f"Email already exists: {new_email}")
            raise EmailAlreadyExistsError(f"Email already exists: {new_email}")

        old_name = employee.name
        for field, value in update_data.items():
            # Only phone_number may be cleared
            if value is None and field != "phone_number":
                continue
            setattr(employee, field, value)

        try:
            db.commit()
            db.refresh(employee)
        except IntegrityError:
            db.rollback()
            logger.error(f"Email already exists: {new_email}")
            raise EmailAlreadyExistsError(f"Email already exists: {new_email}")
        except Exception:
            db.rollback()
            raise

        logger.info(f"Employee updated successfully - ID: {employee_id}, Old name: {old_name}, New name: {employee.name}")
        return employee

    @staticmethod
    def delete_employee(db: Session, employee_id: int) -> None:
        logger.info(f"Deleting employee with id: {employee_id}")
        employee = EmployeeService.get_employee(db, employee_id)
        name = employee.name
        try:
            db.delete(employee)
            db.commit()
        except Exception:
            db.rollback()
            raise
        logger.info(f"Employee deleted successfully - ID: {employee_id}, Name: {name}")
