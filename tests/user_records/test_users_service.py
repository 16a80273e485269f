"""
Persistence operation tests for UsersService against the in-memory pool
"""

import asyncpg
import pytest

from models.user import UserCreateRequest, UserUpdateRequest
from services.base_service import RESOURCE_NOT_FOUND, DATABASE_ERROR, EXECUTION_ERROR, BaseService


ALICE = UserCreateRequest(name="Alice", kmmax=10, niveau="Bronze")


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_create_returns_positive_id(self, users_service):
        result = await users_service.create_user(ALICE)

        assert result.success
        assert result.count == 1
        assert result.data[0]["id"] > 0

    @pytest.mark.asyncio
    async def test_create_then_get_returns_same_fields(self, users_service):
        created = await users_service.create_user(ALICE)
        result = await users_service.get_user_by_id(created.data[0]["id"])

        assert result.success
        assert result.data[0] == {"id": created.data[0]["id"], "name": "Alice", "kmmax": 10, "niveau": "Bronze"}

    @pytest.mark.asyncio
    async def test_create_storage_error_is_reported(self, users_service, fake_pool):
        fake_pool.fail_with = asyncpg.exceptions.PostgresError('relation "users" does not exist')

        result = await users_service.create_user(ALICE)

        assert not result.success
        assert result.error_type == DATABASE_ERROR
        assert "users" in result.error


class TestGetUser:

    @pytest.mark.asyncio
    async def test_missing_user_is_not_found(self, users_service):
        result = await users_service.get_user_by_id(999)

        assert not result.success
        assert result.error_type == RESOURCE_NOT_FOUND
        assert result.data is None

    @pytest.mark.asyncio
    async def test_unexpected_error_is_execution_error(self, users_service, fake_pool):
        fake_pool.fail_with = ConnectionResetError("connection lost")

        result = await users_service.get_user_by_id(1)

        assert result.error_type == EXECUTION_ERROR
        assert result.error == "connection lost"


class TestListUsers:

    @pytest.mark.asyncio
    async def test_empty_table(self, users_service):
        result = await users_service.list_users()

        assert result.success
        assert result.data == []
        assert result.count == 0

    @pytest.mark.asyncio
    async def test_lists_created_users(self, users_service):
        names = ["Alice", "Bob", "Chloe"]
        for name in names:
            await users_service.create_user(UserCreateRequest(name=name, kmmax=5, niveau="Silver"))

        result = await users_service.list_users()

        assert result.count == 3
        assert [row["name"] for row in result.data] == names


class TestUpdateUser:

    @pytest.mark.asyncio
    async def test_update_existing_user(self, users_service, fake_pool):
        user_id = fake_pool.add_user("Alice", 10, "Bronze")

        result = await users_service.update_user(user_id, UserUpdateRequest(name="Alice B", kmmax=42, niveau="Gold"))

        assert result.success
        assert result.count == 1
        assert fake_pool.rows[user_id] == {"userid": user_id, "name": "Alice B", "kmmax": 42, "niveau": "Gold"}

    @pytest.mark.asyncio
    async def test_update_missing_user_affects_no_rows(self, users_service):
        result = await users_service.update_user(404, UserUpdateRequest(name="Nobody", kmmax=1, niveau="None"))

        assert not result.success
        assert result.count == 0
        assert result.error_type == RESOURCE_NOT_FOUND


class TestDeleteUser:

    @pytest.mark.asyncio
    async def test_delete_then_repeat(self, users_service, fake_pool):
        user_id = fake_pool.add_user("Alice", 10, "Bronze")

        first = await users_service.delete_user(user_id)
        second = await users_service.delete_user(user_id)
        lookup = await users_service.get_user_by_id(user_id)

        assert first.success and first.count == 1
        assert not second.success and second.count == 0
        assert second.error_type == RESOURCE_NOT_FOUND
        assert lookup.error_type == RESOURCE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_storage_error(self, users_service, fake_pool):
        fake_pool.fail_with = asyncpg.exceptions.PostgresError("deadlock detected")

        result = await users_service.delete_user(1)

        assert result.error_type == DATABASE_ERROR


@pytest.mark.asyncio
async def test_each_operation_uses_one_connection_and_statement(users_service, fake_pool):
    created = await users_service.create_user(ALICE)
    user_id = created.data[0]["id"]
    await users_service.get_user_by_id(user_id)
    await users_service.list_users()
    await users_service.update_user(user_id, UserUpdateRequest(name="A", kmmax=1, niveau="B"))
    await users_service.delete_user(user_id)

    assert fake_pool.acquired == fake_pool.released == 5
    assert len(fake_pool.statements) == 5


@pytest.mark.asyncio
async def test_connection_released_on_error(users_service, fake_pool):
    fake_pool.fail_with = asyncpg.exceptions.PostgresError("boom")

    await users_service.update_user(1, UserUpdateRequest(name="A", kmmax=1, niveau="B"))

    assert fake_pool.acquired == fake_pool.released == 1


@pytest.mark.parametrize("status,expected", [
    ("UPDATE 1", 1),
    ("DELETE 0", 0),
    ("DELETE 12", 12),
    ("", 0),
])
def test_affected_rows(status, expected):
    assert BaseService.affected_rows(status) == expected
