"""
User management API routes
All database operations go through the users service layer.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Path

from models.user import UserCreateRequest, UserUpdateRequest, UserResponse, UserMessageResponse, INT4_MAX
from services.base_service import ServiceResult, RESOURCE_NOT_FOUND
from services.users_service import UsersService, get_users_service

router = APIRouter()
logger = logging.getLogger(__name__)


def _raise_for_result(result: ServiceResult):
    """Map a failed service result onto an HTTP error"""
    if result.success:
        return
    if result.error_type == RESOURCE_NOT_FOUND:
        raise HTTPException(status_code=404, detail="User not found")
    raise HTTPException(status_code=500, detail=result.error)


@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int = Path(..., ge=1, le=INT4_MAX),
    users_service: UsersService = Depends(get_users_service)
):
    """Get a single user by id"""
    result = await users_service.get_user_by_id(user_id)
    _raise_for_result(result)

    return UserResponse.from_row(result.data[0])


@router.get("/user", response_model=List[UserResponse])
async def list_users(
    users_service: UsersService = Depends(get_users_service)
):
    """List all users"""
    result = await users_service.list_users()
    _raise_for_result(result)

    return [UserResponse.from_row(row) for row in result.data]


@router.post("/newuser", response_model=UserMessageResponse)
async def create_user(
    request: UserCreateRequest,
    users_service: UsersService = Depends(get_users_service)
):
    """Create a new user"""
    result = await users_service.create_user(request)
    _raise_for_result(result)

    return UserMessageResponse(
        id=result.data[0]["id"],
        message="User created successfully"
    )


@router.put("/user/{user_id}", response_model=UserMessageResponse)
async def update_user(
    request: UserUpdateRequest,
    user_id: int = Path(..., ge=1, le=INT4_MAX),
    users_service: UsersService = Depends(get_users_service)
):
    """Replace the details of a user"""
    result = await users_service.update_user(user_id, request)
    _raise_for_result(result)

    return UserMessageResponse(
        id=user_id,
        message=f"User updated successfully. Total rows/records affected {result.count}"
    )


@router.delete("/deleteuser/{user_id}", response_model=UserMessageResponse)
async def delete_user(
    user_id: int = Path(..., ge=1, le=INT4_MAX),
    users_service: UsersService = Depends(get_users_service)
):
    """Delete a user"""
    result = await users_service.delete_user(user_id)
    _raise_for_result(result)

    return UserMessageResponse(
        id=user_id,
        message=f"User deleted successfully. Total rows/records affected {result.count}"
    )
