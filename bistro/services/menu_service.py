"""Menu and review queries plus admin menu mutations."""

import logging

from fastapi import HTTPException, status
from pymongo.database import Database

from bistro.dtos import ApiResponse, MenuItemCreate, MenuItemUpdate
from bistro.repositories import MenuRepository, ReviewRepository

logger = logging.getLogger(__name__)


class MenuService:
    def __init__(self, db: Database):
        self.db = db
        self.menu_repo = MenuRepository(db)
        self.review_repo = ReviewRepository(db)

    def list_menu(self) -> ApiResponse:
        items = self.menu_repo.list_all()
        return ApiResponse(
            message="menu items fetched",
            data=[item.to_public() for item in items],
        )

    def get_menu_item(self, item_id: str) -> ApiResponse:
        item = self.menu_repo.find_by_id(item_id)
        if item is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="menu item not found"
            )
        return ApiResponse(message="menu item fetched", data=item.to_public())

    def list_reviews(self) -> ApiResponse:
        reviews = self.review_repo.list_all()
        return ApiResponse(
            message="reviews fetched",
            data=[review.to_public() for review in reviews],
        )

    def add_menu_item(self, payload: MenuItemCreate) -> ApiResponse:
        item = self.menu_repo.insert_one(payload.model_dump(exclude_none=True))
        logger.info("Menu item %s added", item.id)
        return ApiResponse(
            message="menu item added",
            data={"insertedId": str(item.id), "item": item.to_public()},
        )

    def update_menu_item(self, item_id: str, payload: MenuItemUpdate) -> ApiResponse:
        updates = payload.model_dump(exclude_unset=True)
        if not updates:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="no fields to update"
            )
        result = self.menu_repo.update_one(item_id, updates)
        matched = result.matched_count > 0
        return ApiResponse(
            success=matched,
            message="menu item updated" if matched else "menu item not found",
            data={
                "matchedCount": result.matched_count,
                "modifiedCount": result.modified_count,
            },
        )

    def delete_menu_item(self, item_id: str) -> ApiResponse:
        deleted = self.menu_repo.delete_one(item_id)
        if deleted:
            logger.info("Menu item %s deleted", item_id)
        return ApiResponse(
            success=deleted > 0,
            message="menu item deleted" if deleted else "menu item not found",
            data={"deletedCount": deleted},
        )
