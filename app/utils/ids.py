# app/utils/ids.py
import re
from typing import Optional, Union

# Row ids are positive BIGINT-sized integers written as plain ASCII digits
MAX_ID = 2 ** 63 - 1
_ID_PATTERN = re.compile(r"[0-9]+")


def parse_id(raw: Union[int, str, None]) -> Optional[int]:
    """Return the id as an int, or None when it cannot name a stored row"""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _ID_PATTERN.fullmatch(raw):
        value = int(raw)
    else:
        return None
    return value if 0 < value <= MAX_ID else None
