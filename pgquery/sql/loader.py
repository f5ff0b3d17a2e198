from pathlib import Path
from loguru import logger
from typing import Dict, Optional

QUERIES_DIR = Path(__file__).resolve().parent / "queries"


class SQLLoader:
    def __init__(self, sql_directory: Path = QUERIES_DIR):
        self.sql_directory = Path(sql_directory)
        self.queries: Dict[str, str] = {}
        self.load_all_queries()

    def load_all_queries(self):
        """Load all SQL files from the queries directory"""
        if not self.sql_directory.exists():
            logger.warning(f"SQL directory does not exist: {self.sql_directory}")
            return

        for sql_file in sorted(self.sql_directory.glob("*.sql")):
            query_name = sql_file.stem
            self.queries[query_name] = sql_file.read_text(encoding='utf-8').strip()
            logger.debug(f"Loaded SQL query: {query_name}")

    def get_query(self, query_name: str) -> Optional[str]:
        """Get a specific query by name"""
        return self.queries.get(query_name)

    def require_query(self, query_name: str) -> str:
        """Get a query by name, failing loudly when the file is missing"""
        query = self.get_query(query_name)
        if query is None:
            raise FileNotFoundError(f"SQL file not found: {self.sql_directory / (query_name + '.sql')}")
        return query


# Global SQL loader instance
sql_loader = SQLLoader()
