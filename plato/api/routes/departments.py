from fastapi import APIRouter

from plato.schemas.generator import DepartmentConfig
from plato.services.department_config import DEPARTMENT_CONFIGS, resolve_config

router = APIRouter()


@router.get("/")
def list_departments():
    """Departments with their own vocabulary."""
    return {"departments": sorted(DEPARTMENT_CONFIGS)}


@router.get("/{name}", response_model=DepartmentConfig)
def get_department(name: str):
    """Vocabulary used for a department; unknown names get the default set."""
    return resolve_config(name)
