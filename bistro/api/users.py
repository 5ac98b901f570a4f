"""User registration and role administration endpoints."""

from fastapi import APIRouter, Body, Depends, Response, status
from pymongo.database import Database

from bistro.api.deps import get_db, verify_admin, verify_self
from bistro.dtos import ApiResponse, UserUpsertRequest
from bistro.services.user_service import UserService

router = APIRouter(tags=["Users"])


@router.patch("/users/{email}", response_model=ApiResponse)
def upsert_user(
    email: str,
    response: Response,
    payload: UserUpsertRequest | None = Body(default=None),
    db: Database = Depends(get_db),
):
    payload = payload or UserUpsertRequest()
    result = UserService(db).upsert_user(email, payload)
    if result.success:
        response.status_code = status.HTTP_201_CREATED
    return result


@router.get(
    "/user/admin/{email}",
    response_model=ApiResponse,
    dependencies=[Depends(verify_self)],
)
def check_admin(email: str, db: Database = Depends(get_db)):
    return UserService(db).is_admin(email)


@router.get(
    "/users",
    response_model=ApiResponse,
    dependencies=[Depends(verify_admin)],
)
def list_users(db: Database = Depends(get_db)):
    return UserService(db).list_users()


@router.patch(
    "/user/update/role/{user_id}",
    response_model=ApiResponse,
    dependencies=[Depends(verify_admin)],
)
def promote_user(user_id: str, db: Database = Depends(get_db)):
    return UserService(db).promote_to_admin(user_id)


@router.delete(
    "/user/delete/{user_id}",
    response_model=ApiResponse,
    dependencies=[Depends(verify_admin)],
)
def delete_user(user_id: str, db: Database = Depends(get_db)):
    return UserService(db).delete_user(user_id)
