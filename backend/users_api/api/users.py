import logging

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from users_api import repository
from users_api.database import get_pool
from users_api.models.user import ErrorMessage, Message, UserCreate, UserRead
from users_api.repository import ErrorKind, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

STATUS_FOR_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE_FAILURE: 500,
}

NOT_FOUND_MESSAGE = "User not found"

_server_error = {500: {"model": ErrorMessage, "description": "Server error"}}


def _error_response(err: StoreError, failure_message: str) -> JSONResponse:
    if err.kind is ErrorKind.NOT_FOUND:
        message = NOT_FOUND_MESSAGE
    else:
        logger.exception(failure_message)
        message = failure_message
    return JSONResponse(
        status_code=STATUS_FOR_KIND[err.kind], content={"error": message}
    )


@router.get("/", include_in_schema=False)
@router.get(
    "",
    summary="Get all users",
    description="Endpoint to get all registered users.",
    responses={
        200: {"model": list[UserRead], "description": "Successful response"},
        **_server_error,
    },
)
def get_users(pool: Engine = Depends(get_pool)):
    try:
        return repository.list_users(pool)
    except StoreError as err:
        return _error_response(err, "Error getting users")


@router.get(
    "/{user_id}",
    summary="Get user by ID",
    description="Endpoint to get a user by their ID.",
    responses={
        200: {"model": UserRead, "description": "User found"},
        404: {"model": ErrorMessage, "description": "User not found"},
        **_server_error,
    },
)
def get_user_by_id(
    user_id: int = Path(description="ID of the user to get"),
    pool: Engine = Depends(get_pool),
):
    try:
        return repository.get_user(pool, user_id)
    except StoreError as err:
        return _error_response(err, "Error getting user")


@router.post("/", status_code=201, include_in_schema=False)
@router.post(
    "",
    response_model=Message,
    status_code=201,
    summary="Create a new user",
    description="Endpoint to create a new user.",
    responses=_server_error,
)
def create_user(body: UserCreate, pool: Engine = Depends(get_pool)):
    try:
        repository.create_user(pool, body)
    except StoreError as err:
        return _error_response(err, "Error creating user")
    logger.info("Created user %s", body.username)
    return {"message": "User created successfully"}


@router.put(
    "/{user_id}",
    response_model=Message,
    summary="Update user by ID",
    description=(
        "Endpoint to update a user by their ID. All fields are overwritten. "
        "Succeeds even when no user has the given ID."
    ),
    responses=_server_error,
)
def update_user(
    body: UserCreate,
    user_id: int = Path(description="ID of the user to update"),
    pool: Engine = Depends(get_pool),
):
    try:
        affected = repository.update_user(pool, user_id, body)
    except StoreError as err:
        return _error_response(err, "Error updating user")
    # Affected row count is not checked
    logger.info("Updated user %s (%d rows)", user_id, affected)
    return {"message": "User updated successfully"}


@router.delete(
    "/{user_id}",
    response_model=Message,
    summary="Delete user by ID",
    description=(
        "Endpoint to delete a user by their ID. "
        "Succeeds even when no user has the given ID."
    ),
    responses=_server_error,
)
def delete_user(
    user_id: int = Path(description="ID of the user to delete"),
    pool: Engine = Depends(get_pool),
):
    try:
        affected = repository.delete_user(pool, user_id)
    except StoreError as err:
        return _error_response(err, "Error deleting user")
    logger.info("Deleted user %s (%d rows)", user_id, affected)
    return {"message": "User deleted successfully"}
