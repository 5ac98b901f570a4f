"""User account service using repository pattern"""

import logging

from pymongo.database import Database

from bistro.dtos import ApiResponse, UserUpsertRequest
from bistro.repositories import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Database):
        self.db = db
        self.user_repo = UserRepository(db)

    def upsert_user(self, email: str, payload: UserUpsertRequest) -> ApiResponse:
        """Insert the user unless one with this email already exists."""
        existing = self.user_repo.find_by_email(email)
        if existing is not None:
            return ApiResponse(success=False, message="user already exists", data=None)

        document = payload.model_dump(exclude_none=True)
        document["email"] = email
        # role is only granted through promote_to_admin
        document.pop("role", None)
        user = self.user_repo.insert_one(document)
        logger.info("User %s registered", email)
        return ApiResponse(
            message="user created",
            data={"insertedId": str(user.id), "user": user.to_public()},
        )

    def is_admin(self, email: str) -> ApiResponse:
        user = self.user_repo.find_by_email(email)
        return ApiResponse(
            message="admin status fetched",
            data=bool(user and user.is_admin),
        )

    def list_users(self) -> ApiResponse:
        users = self.user_repo.list_all()
        return ApiResponse(
            message="users fetched", data=[user.to_public() for user in users]
        )

    def promote_to_admin(self, user_id: str) -> ApiResponse:
        result = self.user_repo.promote_to_admin(user_id)
        matched = result.matched_count > 0
        if matched:
            logger.info("User %s promoted to admin", user_id)
        return ApiResponse(
            success=matched,
            message="user promoted to admin" if matched else "user not found",
            data={
                "matchedCount": result.matched_count,
                "modifiedCount": result.modified_count,
            },
        )

    def delete_user(self, user_id: str) -> ApiResponse:
        deleted = self.user_repo.delete_one(user_id)
        return ApiResponse(
            success=deleted > 0,
            message="user deleted" if deleted else "user not found",
            data={"deletedCount": deleted},
        )
