from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse
import logging
from typing import List

from src.dependencies.providers import get_user_service
from src.models.user import User
from src.services.user_service import UserService

router = APIRouter()
logger = logging.getLogger(__name__)

EMAIL_MISMATCH_MESSAGE = "Email in URL must match email in request body"

# Failures are returned as plain text carrying the error message
ERROR_RESPONSES = {
    400: {
        "description": "Validation or business rule failure",
        "content": {"text/plain": {"schema": {"type": "string"}}},
    }
}

@router.get(
    "/list",
    response_model=List[User],
    name="List all users",
    description="Retrieve a list of all users",
    responses=ERROR_RESPONSES,
)
def list_users(service: UserService = Depends(get_user_service)):
    return service.list()

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    name="Create user",
    description="Create a new user",
    responses=ERROR_RESPONSES,
)
def create_user(user: User, service: UserService = Depends(get_user_service)):
    service.create(user)
    return Response(status_code=status.HTTP_201_CREATED)

@router.get(
    "",
    response_model=User,
    name="Get user by email",
    description="Retrieve a user by their email address",
    responses=ERROR_RESPONSES,
)
def get_user(email: str = Query(...), service: UserService = Depends(get_user_service)):
    return service.get_by_email(email)

@router.put(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="Update user",
    description="Update user information (email cannot be changed as it's the primary key)",
    responses=ERROR_RESPONSES,
)
def update_user(
    user: User,
    email: str = Query(...),
    service: UserService = Depends(get_user_service),
):
    if email != user.email:
        logger.warning(f"Rejected update: URL email {email} does not match body email {user.email}")
        return PlainTextResponse(EMAIL_MISMATCH_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)
    service.update(user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="Delete user",
    description="Delete a user by email",
    responses=ERROR_RESPONSES,
)
def delete_user(email: str = Query(...), service: UserService = Depends(get_user_service)):
    service.delete(email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
