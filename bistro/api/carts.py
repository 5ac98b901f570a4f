from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from bistro.api.deps import get_db, verify_self
from bistro.dtos import ApiResponse, CartItemCreate
from bistro.services.cart_service import CartService

router = APIRouter(tags=["Carts"])


@router.post(
    "/carts", response_model=ApiResponse, status_code=status.HTTP_201_CREATED
)
def add_cart_item(payload: CartItemCreate, db: Database = Depends(get_db)):
    return CartService(db).add_item(payload)


@router.get(
    "/carts/{email}",
    response_model=ApiResponse,
    dependencies=[Depends(verify_self)],
)
def list_cart(email: str, db: Database = Depends(get_db)):
    return CartService(db).list_items(email)


@router.delete("/cart/{item_id}", response_model=ApiResponse)
def remove_cart_item(item_id: str, db: Database = Depends(get_db)):
    return CartService(db).remove_item(item_id)
