from fastapi import APIRouter

from bistro.dtos import ApiResponse, TokenRequest
from bistro.services.auth_service import issue_token

router = APIRouter(tags=["Auth"])


@router.post("/jwt", response_model=ApiResponse)
def create_token(payload: TokenRequest):
    """Issue a one-hour bearer token for the submitted identity."""
    return issue_token(payload)


@router.get("/log-out", response_model=ApiResponse)
def logout():
    """Tokens are stateless; the client discards its copy."""
    return ApiResponse(message="logged out")
