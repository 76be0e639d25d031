from typing import Any, Dict, List, Optional


def cursor_to_dicts(cur) -> List[Dict[str, Any]]:
    """Turn the remaining rows of an executed cursor into column->value dicts."""
    cols = [c[0] for c in cur.description]
    return [dict(zip(cols, row)) for row in cur.fetchall()]


def cursor_to_dict(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    if row is None:
        return None
    cols = [c[0] for c in cur.description]
    return dict(zip(cols, row))
