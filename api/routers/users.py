"""
User endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_catalog_service, paginate
from api.schemas.common import DataResponse, PaginatedResponse
from api.schemas.user import UserCreate, UserResponse
from movie_catalog.requests import UserCreateRequest
from movie_catalog.service import CatalogService

router = APIRouter(prefix="/users")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DataResponse[UserResponse])
def create_user(
    body: UserCreate,
    service: CatalogService = Depends(get_catalog_service),
):
    """
    Create a user.

    The email is checked for syntax only and stored in normalized form.
    """
    user = service.create_user(UserCreateRequest(**body.model_dump()))
    return {"data": UserResponse.model_validate(user)}


@router.get("", response_model=PaginatedResponse[UserResponse])
def list_users(
    page: Optional[int] = Query(None, description="Page number"),
    limit: Optional[int] = Query(None, description="Items per page"),
    service: CatalogService = Depends(get_catalog_service),
):
    return paginate(service.list_users(page=page, limit=limit), UserResponse.model_validate)


@router.get("/{user_id}", response_model=DataResponse[UserResponse])
def get_user(
    user_id: int,
    service: CatalogService = Depends(get_catalog_service),
):
    return {"data": UserResponse.model_validate(service.get_user(user_id))}
