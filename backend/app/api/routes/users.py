"""User Routes — one endpoint per repository operation, no logic of their own.

Invariants:
    - /find is registered before /{user_id} so it is never captured as an id
    - Responses serialize User by alias (createdAt)
    - UsersApiError propagates to the global handlers (404 not found, 503 store)

Design Decisions:
    - Sync `def` handlers: boto3 blocks, FastAPI runs them in its thread pool
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_user_repository
from app.models.user import UserRecord, new_user_record
from app.schemas.user import User, UserCreateRequest, UserUpdateRequest
from app.services.user_repository import UserRepository

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=list[User])
def find_all(repository: UserRepository = Depends(get_user_repository)):
    """All users (full table scan)."""
    return repository.find_all()


@router.get("/find", response_model=User)
def find_user(
    user_id: str = Query(..., alias="id"),
    repository: UserRepository = Depends(get_user_repository),
):
    """Lookup by ?id= query parameter."""
    return repository.find_by_sample(UserRecord.with_id(user_id))


@router.get("/{user_id}", response_model=User)
def find_user_by_id(
    user_id: str, repository: UserRepository = Depends(get_user_repository),
):
    return repository.find_by_id(user_id)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreateRequest,
    repository: UserRepository = Depends(get_user_repository),
):
    return repository.insert(new_user_record(body.name))


@router.put("/{user_id}", response_model=User)
def update_user(
    user_id: str,
    body: UserUpdateRequest,
    repository: UserRepository = Depends(get_user_repository),
):
    return repository.update(user_id, body)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str, repository: UserRepository = Depends(get_user_repository),
):
    repository.delete(user_id)
