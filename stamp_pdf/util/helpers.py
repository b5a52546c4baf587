from typing import Any, Iterable, Optional

PLACEHOLDER = "brak"


def text(v: Any, default: str = "") -> str:
    """Falsy values (None, "", 0) collapse to ``default``."""
    if v is None or v == "" or v == 0:
        return default
    if isinstance(v, (list, tuple)):
        return ", ".join(text(x) for x in v if text(x)) or default
    return str(v)


def first(*values: Any, default: str = "") -> str:
    for v in values:
        out = text(v)
        if out:
            return out
    return default


def split_csv(raw: Optional[str]) -> Iterable[str]:
    return [x.strip() for x in (raw or "").split(",") if x.strip()]
