"""Menu and review endpoints."""

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from bistro.api.deps import get_db, verify_admin
from bistro.dtos import ApiResponse, MenuItemCreate, MenuItemUpdate
from bistro.services.menu_service import MenuService

router = APIRouter(tags=["Menu"])


@router.get("/menu", response_model=ApiResponse)
def list_menu(db: Database = Depends(get_db)):
    return MenuService(db).list_menu()


@router.get("/menu/{item_id}", response_model=ApiResponse)
def get_menu_item(item_id: str, db: Database = Depends(get_db)):
    return MenuService(db).get_menu_item(item_id)


@router.get("/reviews", response_model=ApiResponse, tags=["Reviews"])
def list_reviews(db: Database = Depends(get_db)):
    return MenuService(db).list_reviews()


@router.post(
    "/menu",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(verify_admin)],
)
def add_menu_item(payload: MenuItemCreate, db: Database = Depends(get_db)):
    return MenuService(db).add_menu_item(payload)


@router.patch(
    "/menu/{item_id}",
    response_model=ApiResponse,
    dependencies=[Depends(verify_admin)],
)
def update_menu_item(
    item_id: str, payload: MenuItemUpdate, db: Database = Depends(get_db)
):
    return MenuService(db).update_menu_item(item_id, payload)


@router.delete(
    "/menu/{item_id}",
    response_model=ApiResponse,
    dependencies=[Depends(verify_admin)],
)
def delete_menu_item(item_id: str, db: Database = Depends(get_db)):
    return MenuService(db).delete_menu_item(item_id)
