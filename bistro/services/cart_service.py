from pymongo.database import Database

from bistro.dtos import ApiResponse, CartItemCreate
from bistro.repositories import CartRepository


class CartService:
    def __init__(self, db: Database):
        self.db = db
        self.cart_repo = CartRepository(db)

    def add_item(self, payload: CartItemCreate) -> ApiResponse:
        item = self.cart_repo.insert_one(payload.model_dump(exclude_none=True))
        return ApiResponse(
            message="item added to cart",
            data={"insertedId": str(item.id), "item": item.to_public()},
        )

    def list_items(self, email: str) -> ApiResponse:
        items = self.cart_repo.list_by_email(email)
        return ApiResponse(
            message="cart fetched", data=[item.to_public() for item in items]
        )

    def remove_item(self, item_id: str) -> ApiResponse:
        deleted = self.cart_repo.delete_one(item_id)
        return ApiResponse(
            success=deleted > 0,
            message="item removed from cart" if deleted else "cart item not found",
            data={"deletedCount": deleted},
        )
