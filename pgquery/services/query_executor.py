from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from fastapi.encoders import jsonable_encoder
from psycopg.rows import dict_row
from psycopg.types.multirange import Multirange
from psycopg.types.range import Range

from pgquery.config.logging_config import logger
from pgquery.errors import ExecutionError, ValidationError
from pgquery.models.schemas import FieldInfo, QueryRequest, QueryResult
from pgquery.services.database import error_message
from pgquery.services.safety import check_query_safety

# Driver types without a JSON form are rendered as PostgreSQL text literals
ROW_ENCODERS = {
    Range: str,
    Multirange: str,
    bytes: lambda value: "\\x" + value.hex(),
    memoryview: lambda value: "\\x" + value.hex(),
}


def json_safe(value: Any) -> Any:
    """JSON-compatible form of a row value, falling back to its text form"""
    try:
        return jsonable_encoder(value, custom_encoder=ROW_ENCODERS)
    except (TypeError, ValueError):
        return str(value)


class QueryExecutor:
    def __init__(self, pool):
        self.pool = pool

    @staticmethod
    def parse_request(payload: Any) -> QueryRequest:
        """Extract the query text from a decoded request body.

        Anything other than a mapping with a non-empty string ``query`` is a
        validation failure. This runs before any connection is acquired.
        """
        query = payload.get("query") if isinstance(payload, Mapping) else None
        if not query or not isinstance(query, str):
            raise ValidationError()
        return QueryRequest(query=query)

    async def execute(self, payload: Any) -> QueryResult:
        """Validate, filter and run an ad hoc statement exactly once.

        The literal query text is executed without parameters on a single
        pooled connection which is returned to the pool whether or not the
        statement succeeds.
        """
        request = self.parse_request(payload)
        check_query_safety(request.query)

        logger.debug(f"Executing SQL: {request.query}")
        try:
            async with self.pool.connection() as conn:
                async with conn.cursor(row_factory=dict_row) as cur:
                    await cur.execute(request.query)
                    return await self._process_result(cur)
        except Exception as e:
            message = error_message(e)
            logger.error(f"Query execution failed: {message}")
            raise ExecutionError(message) from e

    async def _process_result(self, cur) -> QueryResult:
        """Copy rows, field descriptors and row count off the cursor"""
        rows: List[Dict[str, Any]] = []
        fields: List[FieldInfo] = []

        # Statements without a result set (DDL, SET, ...) carry no description
        if cur.description is not None:
            rows = [
                {key: json_safe(value) for key, value in row.items()}
                for row in await cur.fetchall()
            ]
            fields = [
                FieldInfo(name=col.name, data_type_id=col.type_code)
                for col in cur.description
            ]

        row_count: Optional[int] = cur.rowcount
        if row_count is None or row_count < 0:
            row_count = None

        logger.debug(f"Query returned {len(rows)} rows (rowCount={row_count})")

        return QueryResult(row_count=row_count, rows=rows, fields=fields)
