# models.py
# simple containers passed between the db helpers, the request handler and the template
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

import config


@dataclass(frozen=True)
class ConnectionInfo:
    scheme: str
    host: str
    port: int = config.DEFAULT_PORT
    user: str = ""
    password: str = ""
    dbname: str = ""
    params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def sslmode(self) -> str:
        return self.params.get("sslmode", config.DEFAULT_SSLMODE)

    def safe_display(self) -> str:
        """user@host:port/dbname, never includes the password."""
        return f"{self.user}@{self.host}:{self.port}/{self.dbname}"

    def __repr__(self) -> str:
        return f"ConnectionInfo({self.scheme}://{self.safe_display()})"


@dataclass
class QueryResult:
    columns: List[str]
    rows: List[Dict[str, Any]]


class OutcomeKind(str, Enum):
    OK = "ok"
    CONFIG_MISSING = "config_missing"
    MALFORMED_URL = "malformed_url"
    CONNECTION_ERROR = "connection_error"
    QUERY_ERROR = "query_error"
    INVALID_IDENTIFIER = "invalid_identifier"
    NO_COLUMN = "no_column"


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    result: Optional[QueryResult] = None
    message: str = ""

    @classmethod
    def success(cls, result: QueryResult) -> "Outcome":
        return cls(OutcomeKind.OK, result=result)

    @classmethod
    def failure(cls, kind: OutcomeKind, message: str = "") -> "Outcome":
        return cls(kind, message=message)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    @property
    def rows(self) -> List[Dict[str, Any]]:
        return self.result.rows if self.result else []

    @property
    def columns(self) -> List[str]:
        return self.result.columns if self.result else []


@dataclass
class DemoQueryContext:
    """Evidence for the unsafe filter demo; only built when the flag is on."""
    selected_table: Optional[str] = None
    column: Optional[str] = None
    raw: str = ""
    sql: str = ""
    outcome: Optional[Outcome] = None

    @property
    def error_message(self) -> str:
        if self.outcome is None or self.outcome.ok:
            return ""
        return self.outcome.message


@dataclass
class BrowserPage:
    status: Outcome
    connection: Optional[ConnectionInfo] = None
    db_time: Any = None
    tables: List[str] = field(default_factory=list)
    tables_error: Optional[str] = None
    selected: str = ""
    rows: Optional[Outcome] = None
    demo: Optional[DemoQueryContext] = None

    @property
    def connected(self) -> bool:
        return self.status.ok
