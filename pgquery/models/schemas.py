from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Any, List, Optional, Literal


class QueryRequest(BaseModel):
    query: str


class FieldInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    data_type_id: int = Field(alias="dataTypeID")


class QueryResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    row_count: Optional[int] = Field(default=None, alias="rowCount")
    rows: List[Dict[str, Any]] = Field(default_factory=list)
    fields: List[FieldInfo] = Field(default_factory=list)


class TableColumn(BaseModel):
    column_name: str
    data_type: str
    is_nullable: Literal["YES", "NO"]
    column_default: Optional[str] = None


class TableInfo(BaseModel):
    table_schema: str
    table_name: str
    columns: List[TableColumn] = Field(default_factory=list)


class SchemaResult(BaseModel):
    success: Literal[True] = True
    tables: List[TableInfo] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    success: Literal[False] = False


class HealthResponse(BaseModel):
    status: str
    database: Optional[str] = None
    host: Optional[str] = None
    port: int
