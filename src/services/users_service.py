"""
Users service - persistence operations for the users table
"""

import logging
from typing import Dict, Any

import asyncpg
from fastapi import Depends

from database.connection import get_db_pool
from models.user import UserPayload
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

INSERT_USER = "INSERT INTO users (name, kmmax, niveau) VALUES ($1, $2, $3) RETURNING userid"
SELECT_USER = "SELECT userid, name, kmmax, niveau FROM users WHERE userid = $1"
SELECT_ALL_USERS = "SELECT userid, name, kmmax, niveau FROM users ORDER BY userid"
UPDATE_USER = "UPDATE users SET name = $2, niveau = $3, kmmax = $4 WHERE userid = $1"
DELETE_USER = "DELETE FROM users WHERE userid = $1"


def _row_to_user(row) -> Dict[str, Any]:
    return {
        "id": row["userid"],
        "name": row["name"],
        "kmmax": row["kmmax"],
        "niveau": row["niveau"]
    }


class UsersService(BaseService):
    """Service for user record operations, one statement per call"""

    def __init__(self, db_pool: asyncpg.Pool):
        super().__init__("users", db_pool)

    async def create_user(self, user: UserPayload) -> ServiceResult:
        """
        Insert a new user

        Args:
            user: Name, kmmax and niveau of the new user

        Returns:
            ServiceResult whose single data row carries the storage-assigned id
        """
        try:
            async with self.db_pool.acquire() as conn:
                logger.info(f"Executing INSERT: {INSERT_USER}")
                user_id = await conn.fetchval(INSERT_USER, user.name, user.kmmax, user.niveau)

            if user_id is None:
                raise RuntimeError("Insert operation failed - no id returned")

            logger.info(f"Inserted user {user_id}")
            return ServiceResult(
                success=True,
                data=[{"id": user_id, "name": user.name, "kmmax": user.kmmax, "niveau": user.niveau}],
                count=1
            )

        except Exception as e:
            return self.failure("Create", e)

    async def get_user_by_id(self, user_id: int) -> ServiceResult:
        """
        Get a user by id

        Returns:
            ServiceResult with the user row, or RESOURCE_NOT_FOUND
        """
        try:
            async with self.db_pool.acquire() as conn:
                row = await conn.fetchrow(SELECT_USER, user_id)
        except Exception as e:
            return self.failure("Read", e)

        if row is None:
            logger.info(f"No user found with id {user_id}")
            return self.not_found(user_id)

        return ServiceResult(success=True, data=[_row_to_user(row)], count=1)

    async def list_users(self) -> ServiceResult:
        """Get every user"""
        try:
            async with self.db_pool.acquire() as conn:
                rows = await conn.fetch(SELECT_ALL_USERS)
        except Exception as e:
            return self.failure("List", e)

        data = [_row_to_user(row) for row in rows]
        return ServiceResult(success=True, data=data, count=len(data))

    async def update_user(self, user_id: int, user: UserPayload) -> ServiceResult:
        """
        Overwrite name, niveau and kmmax of a user

        Args:
            user_id: Id of the user to update
            user: New field values

        Returns:
            ServiceResult with count set to the number of rows affected
        """
        try:
            async with self.db_pool.acquire() as conn:
                logger.info(f"Executing UPDATE: {UPDATE_USER}")
                status = await conn.execute(UPDATE_USER, user_id, user.name, user.niveau, user.kmmax)
            updated_rows = self.affected_rows(status)
        except Exception as e:
            return self.failure("Update", e)

        logger.info(f"Total rows/records affected {updated_rows}")
        if updated_rows == 0:
            return self.not_found(user_id)

        return ServiceResult(
            success=True,
            data=[{"id": user_id, "name": user.name, "kmmax": user.kmmax, "niveau": user.niveau}],
            count=updated_rows
        )

    async def delete_user(self, user_id: int) -> ServiceResult:
        """
        Delete a user

        Returns:
            ServiceResult with count set to the number of rows affected
        """
        try:
            async with self.db_pool.acquire() as conn:
                logger.info(f"Executing DELETE: {DELETE_USER}")
                status = await conn.execute(DELETE_USER, user_id)
            deleted_rows = self.affected_rows(status)
        except Exception as e:
            return self.failure("Delete", e)

        logger.info(f"Total rows/records affected {deleted_rows}")
        if deleted_rows == 0:
            return self.not_found(user_id)

        return ServiceResult(success=True, data=[], count=deleted_rows)


def get_users_service(db_pool: asyncpg.Pool = Depends(get_db_pool)) -> UsersService:
    """FastAPI dependency building the users service on the application pool"""
    return UsersService(db_pool)
