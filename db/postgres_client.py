# db/postgres_client.py
import logging

import psycopg2

from db_url import connect_kwargs
from models import ConnectionInfo, QueryResult

LOG = logging.getLogger(__name__)


def connect(info: ConnectionInfo):
    """
    Open a psycopg2 connection for `info`.
    The session is read-only and autocommit, so a failed statement does not
    poison the ones after it and nothing issued through it can write.
    """
    LOG.info("connecting to %s (sslmode=%s)", info.safe_display(), info.sslmode)
    conn = psycopg2.connect(**connect_kwargs(info))
    try:
        conn.set_session(readonly=True, autocommit=True)
    except psycopg2.Error:
        conn.close()
        raise
    return conn


def run_query(conn, sql, params=None) -> QueryResult:
    cur = conn.cursor()
    try:
        if params:
            cur.execute(sql, params)
        else:
            cur.execute(sql)
        cols = [c[0] for c in cur.description] if cur.description else []
        rows = [dict(zip(cols, r)) for r in cur.fetchall()] if cur.description else []
        return QueryResult(columns=cols, rows=rows)
    finally:
        cur.close()


def fetch_value(conn, sql, params=None):
    """First column of the first row, or None."""
    res = run_query(conn, sql, params)
    if not res.rows:
        return None
    return res.rows[0][res.columns[0]]
