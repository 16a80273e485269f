"""
Base service layer for database operations on a pooled connection
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

import asyncpg

logger = logging.getLogger(__name__)

RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
DATABASE_ERROR = "DATABASE_ERROR"
EXECUTION_ERROR = "EXECUTION_ERROR"


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None


class BaseService:
    """Base service holding the connection pool for one resource"""

    def __init__(self, resource_name: str, db_pool: asyncpg.Pool):
        self.resource_name = resource_name
        self.db_pool = db_pool

    def not_found(self, record_id: Any, count: int = 0) -> ServiceResult:
        return ServiceResult(
            success=False,
            count=count,
            error=f"Record not found with ID: {record_id}",
            error_type=RESOURCE_NOT_FOUND
        )

    def failure(self, operation: str, exc: Exception) -> ServiceResult:
        """
        Log a failed operation and convert it into a ServiceResult

        Args:
            operation: Operation name used in the log line (e.g. "Create")
            exc: The exception raised by the driver or the service code

        Returns:
            ServiceResult with DATABASE_ERROR for PostgreSQL errors, EXECUTION_ERROR otherwise
        """
        logger.error(f"{operation} operation failed for {self.resource_name}: {exc}", exc_info=True)

        if isinstance(exc, asyncpg.PostgresError):
            return ServiceResult(
                success=False,
                error=f"Database operation failed: {exc}",
                error_type=DATABASE_ERROR
            )
        return ServiceResult(
            success=False,
            error=str(exc),
            error_type=EXECUTION_ERROR
        )

    @staticmethod
    def affected_rows(status: str) -> int:
        """Parse the row count from an asyncpg command status such as "UPDATE 1" """
        # asyncpg returns "DELETE N" / "UPDATE N" where N is the number of rows
        return int(status.split()[-1]) if status else 0
