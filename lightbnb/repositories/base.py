"""
Base repository class with common statement execution helpers.
Runs parameterized statements through a query executor and converts rows into records.
"""

from pydantic import BaseModel
from lightbnb.database import QueryExecutor
from lightbnb.queries import ParameterizedStatement
from typing import TypeVar, Generic, Optional, List, Dict, Any, Type
import logging

logger = logging.getLogger(__name__)

RecordType = TypeVar("RecordType", bound=BaseModel)


class BaseRepository(Generic[RecordType]):
    """
    Base repository class providing row fetching for one record type.
    Driver errors are logged and re-raised unchanged.
    """

    def __init__(self, record: Type[RecordType], executor: QueryExecutor):
        """
        Initialize repository with record class and query executor.

        Args:
            record: Pydantic model that rows are validated into
            executor: Shared query executor, normally a connected ``Database``
        """
        self.record = record
        self.executor = executor

    async def _execute(self, statement: ParameterizedStatement, operation: str) -> List[Dict[str, Any]]:
        try:
            return await self.executor.query(statement.text, statement.values)
        except Exception as e:
            logger.error(f"Failed to {operation}: {e}")
            raise

    async def fetch_all(self, statement: ParameterizedStatement, operation: str) -> List[RecordType]:
        """
        Run a statement and return every row as a record.

        Args:
            statement: Statement to execute
            operation: Short description used in log messages

        Returns:
            List of records, possibly empty
        """
        rows = await self._execute(statement, operation)
        logger.debug(f"Retrieved {len(rows)} {self.record.__name__} records ({operation})")
        return [self.record.model_validate(row) for row in rows]

    async def fetch_one(self, statement: ParameterizedStatement, operation: str) -> Optional[RecordType]:
        """
        Run a statement and return its first row as a record.

        Args:
            statement: Statement to execute
            operation: Short description used in log messages

        Returns:
            Record for the first row, or None when no rows came back
        """
        rows = await self._execute(statement, operation)
        if not rows:
            logger.debug(f"{self.record.__name__} not found ({operation})")
            return None
        return self.record.model_validate(rows[0])
