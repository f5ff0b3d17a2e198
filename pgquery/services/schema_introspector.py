from typing import List

from psycopg.rows import dict_row

from pgquery.config.logging_config import logger
from pgquery.errors import IntrospectionError
from pgquery.models.schemas import SchemaResult, TableColumn, TableInfo
from pgquery.services.database import error_message
from pgquery.sql.loader import SQLLoader, sql_loader


class SchemaIntrospector:
    def __init__(self, pool, loader: SQLLoader = sql_loader):
        self.pool = pool
        self.tables_query = loader.require_query("list_tables")
        self.columns_query = loader.require_query("list_columns")

    async def list_schema(self) -> SchemaResult:
        """List user tables with their columns.

        Tables come back ordered by (schema, name); columns by ordinal
        position. One connection is held for the whole listing and any
        catalog failure aborts it without partial results.
        """
        try:
            async with self.pool.connection() as conn:
                async with conn.cursor(row_factory=dict_row) as cur:
                    await cur.execute(self.tables_query)
                    table_rows = await cur.fetchall()

                    tables: List[TableInfo] = []
                    for table in table_rows:
                        await cur.execute(
                            self.columns_query,
                            (table["table_schema"], table["table_name"]),
                        )
                        column_rows = await cur.fetchall()
                        tables.append(
                            TableInfo(
                                table_schema=table["table_schema"],
                                table_name=table["table_name"],
                                columns=[
                                    TableColumn(
                                        column_name=col["column_name"],
                                        data_type=col["data_type"],
                                        is_nullable=col["is_nullable"],
                                        column_default=col["column_default"],
                                    )
                                    for col in column_rows
                                ],
                            )
                        )
        except Exception as e:
            message = error_message(e)
            logger.error(f"Schema introspection failed: {message}")
            raise IntrospectionError(message) from e

        logger.debug(f"Introspected {len(tables)} tables")
        return SchemaResult(tables=tables)
