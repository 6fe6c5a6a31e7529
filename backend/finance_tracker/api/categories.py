from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import CategoryType
from ..schemas import CategoryCreate, CategoryUpdate, CategoryResponse, EssentialCount
from ..services.category_service import CategoryService

router = APIRouter()


@router.get("/", response_model=list[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    """Get all categories."""
    return CategoryService(db).list_categories()


@router.post("/", response_model=CategoryResponse, status_code=201)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    """Create a new category. Names must be unique (409 otherwise)."""
    return CategoryService(db).create_category(**category.model_dump())


@router.get("/count", response_model=EssentialCount)
def count_categories(db: Session = Depends(get_db)):
    """Count essential vs. non-essential categories."""
    return CategoryService(db).count_by_essential()


@router.get("/filter", response_model=list[CategoryResponse])
def filter_categories(
    type: CategoryType,
    essential: bool,
    db: Session = Depends(get_db),
):
    """Categories matching both a type and an essential flag."""
    return CategoryService(db).find_by_type_and_essential(type, essential)


@router.get("/type/{category_type}", response_model=list[CategoryResponse])
def categories_by_type(category_type: CategoryType, db: Session = Depends(get_db)):
    return CategoryService(db).find_by_type(category_type)


@router.get("/essential/{essential}", response_model=list[CategoryResponse])
def categories_by_essential(essential: bool, db: Session = Depends(get_db)):
    return CategoryService(db).find_by_essential(essential)


@router.get("/fixed-income", response_model=list[CategoryResponse])
def fixed_income(db: Session = Depends(get_db)):
    return CategoryService(db).fixed_income()


@router.get("/variable-income", response_model=list[CategoryResponse])
def variable_income(db: Session = Depends(get_db)):
    return CategoryService(db).variable_income()


@router.get("/essential-expenses", response_model=list[CategoryResponse])
def essential_expenses(db: Session = Depends(get_db)):
    return CategoryService(db).essential_expenses()


@router.get("/discretionary-expenses", response_model=list[CategoryResponse])
def discretionary_expenses(db: Session = Depends(get_db)):
    return CategoryService(db).discretionary_expenses()


@router.get("/invisible-expenses", response_model=list[CategoryResponse])
def invisible_expenses(db: Session = Depends(get_db)):
    return CategoryService(db).invisible_expenses()


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: int, db: Session = Depends(get_db)):
    """Get a single category by ID."""
    return CategoryService(db).get_category(category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    category: CategoryUpdate,
    db: Session = Depends(get_db)
):
    """Replace a category."""
    return CategoryService(db).update_category(category_id, **category.model_dump())


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """Delete a category and all its transactions."""
    CategoryService(db).delete_category(category_id)
    return None
