"""REST API endpoints for user management."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from userapi.models.dto import ErrorResponse, ExistsResponse, UserPayload
from userapi.services.result import Failure, FailureKind
from userapi.services.user_service import UserService, not_found_message

router = APIRouter()

FAILURE_STATUS = {
    FailureKind.INVALID: status.HTTP_400_BAD_REQUEST,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "User not found"}}
INVALID_RESPONSE = {400: {"model": ErrorResponse, "description": "Validation failed"}}


def get_user_service(request: Request) -> UserService:
    """Get the user service owned by the running app."""
    return request.app.state.user_service


def raise_failure(failure: Failure) -> None:
    """Map a service failure to its HTTP error."""
    raise HTTPException(status_code=FAILURE_STATUS[failure.kind], detail=failure.reason)


@router.get("/users")
def list_users(user_service: UserService = Depends(get_user_service)):
    """List all users."""
    return [u.model_dump() for u in user_service.list_users()]


@router.get("/users/{user_id:int}", responses=NOT_FOUND_RESPONSE)
def get_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    """Get a single user."""
    user = user_service.get_user(user_id)

    if not user:
        raise HTTPException(status_code=404, detail=not_found_message(user_id))

    return user.model_dump()


@router.get("/users/{user_id:int}/exists")
def user_exists(user_id: int, user_service: UserService = Depends(get_user_service)):
    """Check whether a user exists."""
    exists = user_service.user_exists(user_id)
    return ExistsResponse(exists=exists, user_id=user_id).model_dump(by_alias=True)


@router.post("/users", status_code=status.HTTP_201_CREATED, responses=INVALID_RESPONSE)
def create_user(
    response: Response,
    payload: Optional[UserPayload] = Body(None),
    user_service: UserService = Depends(get_user_service),
):
    """Create a new user."""
    result = user_service.create_user(payload)
    if isinstance(result, Failure):
        raise_failure(result)

    user = result.value
    response.headers["Location"] = f"/users/{user.id}"
    return user.model_dump()


@router.put("/users/{user_id:int}", responses={**INVALID_RESPONSE, **NOT_FOUND_RESPONSE})
def update_user(
    user_id: int,
    payload: Optional[UserPayload] = Body(None),
    user_service: UserService = Depends(get_user_service),
):
    """Replace an existing user."""
    result = user_service.update_user(user_id, payload)
    if isinstance(result, Failure):
        raise_failure(result)

    return result.value.model_dump()


@router.delete(
    "/users/{user_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
)
def delete_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    """Delete a user."""
    result = user_service.delete_user(user_id)
    if isinstance(result, Failure):
        raise_failure(result)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
