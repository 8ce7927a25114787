# row_viewer.py
import logging
from typing import Tuple

import psycopg2

import config
from db.postgres_client import run_query
from models import Outcome, OutcomeKind
from sql_validator import quote_identifier

LOG = logging.getLogger(__name__)


def build_rows_sql(table: str) -> str:
    # identifiers can't be bound as parameters, so the name is validated and quoted
    return f"SELECT * FROM {quote_identifier(table)} ORDER BY 1 DESC LIMIT {config.ROW_LIMIT}"


def fetch_rows(conn, table: str) -> Outcome:
    """
    Newest-first rows of `table`, at most ROW_LIMIT.
    `table` must already be a valid identifier; ValueError otherwise.
    """
    sql = build_rows_sql(table)
    try:
        res = run_query(conn, sql)
    except psycopg2.Error as e:
        LOG.warning("reading rows of %s failed: %s", table, e)
        return Outcome.failure(OutcomeKind.QUERY_ERROR, str(e).strip())
    LOG.info("read %d rows from %s", len(res.rows), table)
    return Outcome.success(res)


# -------------------------
# INTENTIONALLY VULNERABLE: SQL injection demo.
# `raw` goes into the statement without any escaping. Only reachable when
# ALLOW_UNSAFE_DEMO=1. The connection is a read-only session, and a stacked
# COMMIT could end that transaction, so SQL holding a ";" is never sent.
# -------------------------
STACKED_REFUSED = "Stacked statements are not executed; the demo only runs a single SELECT."


def is_single_statement(sql: str) -> bool:
    # the server only splits a simple query on ";", wherever it appears
    return ";" not in sql


def build_unsafe_filter_sql(table: str, column: str, raw: str) -> str:
    return (
        f"SELECT * FROM {quote_identifier(table)} "
        f"WHERE {quote_identifier(column)}::text ILIKE '%{raw}%' "
        f"ORDER BY 1 DESC LIMIT {config.ROW_LIMIT}"
    )


def run_unsafe_filter(conn, table: str, column: str, raw: str) -> Tuple[str, Outcome]:
    """Run the unescaped filter; returns the generated SQL together with the outcome."""
    sql = build_unsafe_filter_sql(table, column, raw)
    if not is_single_statement(sql):
        LOG.warning("Refusing stacked raw query: %s", sql)
        return sql, Outcome.failure(OutcomeKind.QUERY_ERROR, STACKED_REFUSED)
    LOG.warning("Executing raw query: %s", sql)
    try:
        res = run_query(conn, sql)
    except psycopg2.Error as e:
        # shown verbatim on the page
        return sql, Outcome.failure(OutcomeKind.QUERY_ERROR, str(e).strip())
    return sql, Outcome.success(res)
