# taskboard/routers/employee.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from taskboard.services.employee_service import EmployeeService, to_employee_out
from taskboard.utils.auth import require_admin

router = APIRouter(dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[EmployeeOut])
def get_all_employees(db: Session = Depends(get_db)):
    logger.info("GET /api/employees - fetching all employees")
    return [to_employee_out(employee) for employee in EmployeeService.list_employees(db)]


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(employee: EmployeeCreate, db: Session = Depends(get_db)):
    logger.info(f"POST /api/employees - Creating new employee with email: {employee.email}")
    return to_employee_out(EmployeeService.create_employee(db, employee))


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    logger.info(f"GET /api/employees/{employee_id} - fetching employee")
    return to_employee_out(EmployeeService.get_employee(db, employee_id))


@router.put("/{employee_id}", response_model=EmployeeOut)
def update_employee(employee_id: int, employee: EmployeeUpdate, db: Session = Depends(get_db)):
    logger.info(f"PUT /api/employees/{employee_id} - Updating employee")
    return to_employee_out(EmployeeService.update_employee(db, employee_id, employee))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    logger.info(f"DELETE /api/employees/{employee_id} - Delete employee")
    EmployeeService.delete_employee(db, employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
