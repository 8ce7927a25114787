# db_url.py
# DATABASE_URL -> ConnectionInfo, and ConnectionInfo -> psycopg2.connect() kwargs
from types import MappingProxyType
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl, unquote, urlsplit

import config
from models import ConnectionInfo


def _host_as_written(netloc: str) -> str:
    # urlsplit().hostname lowercases; keep the configured spelling
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        return hostport[1:].partition("]")[0]
    return hostport.partition(":")[0]


def parse_database_url(url: Optional[str]) -> Optional[ConnectionInfo]:
    """
    Split a URL-shaped connection string into its parts.

    Returns None when the url is missing, malformed or has no scheme/host.
    Duplicate query-string keys keep the last value.
    """
    if not url or not isinstance(url, str):
        return None
    try:
        parts = urlsplit(url.strip())
        port = parts.port  # raises ValueError for non-numeric / out of range ports
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None

    params = dict(parse_qsl(parts.query, keep_blank_values=True))
    return ConnectionInfo(
        scheme=parts.scheme,
        host=_host_as_written(parts.netloc),
        port=port if port is not None else config.DEFAULT_PORT,
        user=unquote(parts.username or ""),
        password=unquote(parts.password or ""),
        dbname=parts.path.lstrip("/"),
        params=MappingProxyType(params),
    )


def connect_kwargs(info: ConnectionInfo) -> Dict[str, Any]:
    # only sslmode is forwarded from the query string
    return {
        "host": info.host,
        "port": info.port,
        "dbname": info.dbname,
        "user": info.user,
        "password": info.password,
        "sslmode": info.sslmode,
    }
