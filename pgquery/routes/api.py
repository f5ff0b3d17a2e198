from typing import Any

from fastapi import APIRouter, Depends, Request

from pgquery.config.logging_config import logger
from pgquery.config.settings import settings
from pgquery.models.schemas import ErrorResponse, HealthResponse, QueryRequest, QueryResult, SchemaResult
from pgquery.services.query_executor import QueryExecutor
from pgquery.services.schema_introspector import SchemaIntrospector

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
}


# Dependencies building per-request services over the shared pool
def get_query_executor(request: Request) -> QueryExecutor:
    return QueryExecutor(request.app.state.db_pool)


def get_schema_introspector(request: Request) -> SchemaIntrospector:
    return SchemaIntrospector(request.app.state.db_pool)


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None when the body is empty or not valid JSON"""
    try:
        return await request.json()
    except ValueError:
        logger.debug("Request body is not valid JSON")
        return None


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        database=settings.db_name,
        host=settings.db_host,
        port=settings.db_port,
    )


# Documents the body read by read_json_body
QUERY_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": QueryRequest.model_json_schema()}},
    }
}


@router.post(
    "/query",
    response_model=QueryResult,
    responses=ERROR_RESPONSES,
    openapi_extra=QUERY_REQUEST_BODY,
)
async def execute_query(
    payload: Any = Depends(read_json_body),
    executor: QueryExecutor = Depends(get_query_executor),
):
    """Execute an ad hoc SQL statement"""
    return await executor.execute(payload)


@router.get("/schema", response_model=SchemaResult, responses=ERROR_RESPONSES)
async def list_schema(
    introspector: SchemaIntrospector = Depends(get_schema_introspector),
):
    """List user tables and their columns"""
    return await introspector.list_schema()
