from typing import Optional, Tuple

from pgquery.errors import ForbiddenOperationError
from pgquery.config.logging_config import logger

# Plain substring match on the upper-cased text; comments and string literals
# are not stripped, and other destructive statements are not caught.
DANGEROUS_FRAGMENTS: Tuple[str, ...] = ("DROP DATABASE", "DELETE FROM", "TRUNCATE")


def find_dangerous_fragment(query: str) -> Optional[str]:
    """Return the first denylisted fragment found in the query, if any"""
    normalized = query.strip().upper()
    for fragment in DANGEROUS_FRAGMENTS:
        if fragment in normalized:
            return fragment
    return None


def check_query_safety(query: str) -> None:
    fragment = find_dangerous_fragment(query)
    if fragment is not None:
        logger.warning(f"Rejected query containing forbidden fragment: {fragment}")
        raise ForbiddenOperationError()
