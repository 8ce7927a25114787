# sql_validator.py
import re

# table / column names that may be interpolated into SQL text
IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_valid_identifier(name) -> bool:
    if not isinstance(name, str):
        return False
    return IDENT_RE.fullmatch(name) is not None


def quote_identifier(name: str) -> str:
    # the allow-list check is what makes this safe, not the quotes
    if not is_valid_identifier(name):
        raise ValueError(f"invalid identifier: {name!r}")
    return f'"{name}"'
