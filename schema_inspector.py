# schema_inspector.py
# Catalog lookups against information_schema. Table names are bound as values here,
# never interpolated.
import logging
from typing import List, Optional, Tuple

import psycopg2

import config
from db.postgres_client import fetch_value, run_query

LOG = logging.getLogger(__name__)

LIST_TABLES_SQL = """
    SELECT table_name
    FROM information_schema.tables
    WHERE table_schema = %s AND table_type = 'BASE TABLE'
    ORDER BY table_name
"""

FIRST_TEXT_COLUMN_SQL = """
    SELECT column_name
    FROM information_schema.columns
    WHERE table_schema = %s AND table_name = %s
      AND data_type = ANY(%s)
    ORDER BY ordinal_position
    LIMIT 1
"""

FIRST_COLUMN_SQL = """
    SELECT column_name
    FROM information_schema.columns
    WHERE table_schema = %s AND table_name = %s
    ORDER BY ordinal_position
    LIMIT 1
"""


def list_tables(conn, schema: str = config.TARGET_SCHEMA) -> Tuple[List[str], Optional[str]]:
    """
    Return (table names, error). Names are the base tables of `schema`, sorted.
    On failure the list is empty and error holds the database message.
    """
    try:
        res = run_query(conn, LIST_TABLES_SQL, (schema,))
    except psycopg2.Error as e:
        LOG.warning("listing tables in %s failed: %s", schema, e)
        return [], str(e).strip()
    return [row["table_name"] for row in res.rows], None


def first_text_column(conn, table: str, schema: str = config.TARGET_SCHEMA) -> Optional[str]:
    try:
        return fetch_value(conn, FIRST_TEXT_COLUMN_SQL, (schema, table, list(config.TEXT_COLUMN_TYPES)))
    except psycopg2.Error as e:
        LOG.warning("text column lookup for %s failed: %s", table, e)
        return None


def first_column_any(conn, table: str, schema: str = config.TARGET_SCHEMA) -> Optional[str]:
    try:
        return fetch_value(conn, FIRST_COLUMN_SQL, (schema, table))
    except psycopg2.Error as e:
        LOG.warning("column lookup for %s failed: %s", table, e)
        return None


def resolve_filter_column(conn, table: str, schema: str = config.TARGET_SCHEMA) -> Optional[str]:
    """Column used by the demo filter: first text column, else the very first column."""
    return first_text_column(conn, table, schema) or first_column_any(conn, table, schema)
