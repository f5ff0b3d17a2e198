from contextlib import asynccontextmanager
from fastapi import FastAPI
from pgquery.routes.api import router
from pgquery.config.settings import settings
from pgquery.config.logging_config import logger, setup_logging
from pgquery.errors import AppError
from pgquery.exception_handlers import register_exception_handlers
from pgquery.services.database import create_pool
from pgquery.services.query_executor import QueryExecutor


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    pool = create_pool(settings)
    await pool.open()
    try:
        logger.info("Testing PostgreSQL connection...")
        result = await QueryExecutor(pool).execute({"query": "SELECT 1 as test_column"})
        if result.rows:
            logger.info("✅ PostgreSQL connection successful")
        else:
            logger.warning("Test query returned no rows")
    except AppError as e:
        logger.error(f"❌ PostgreSQL connection test failed: {e}")

    app.state.db_pool = pool
    try:
        yield
    finally:
        await pool.close()


app = FastAPI(
    title="PostgreSQL Query Tool Backend",
    description="FastAPI backend for running ad hoc SQL and browsing the database schema",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include API routes
app.include_router(router, prefix="/api")


@app.get("/")
async def root():
    return {
        "message": "PostgreSQL Query Tool Backend",
        "database": settings.db_name,
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "pgquery.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
