"""Date hint embedded in an upload's filename, e.g. "260112 식단표.xlsx" -> 2026-01-12."""
import re
from pathlib import PurePath
from typing import NamedTuple, Optional

_SIX_DIGITS = re.compile(r"(?<!\d)(\d{6})(?!\d)")


class FilenameHint(NamedTuple):
    y: int
    mo: int
    d: int


def parse_filename_hint(filename: str) -> Optional[FilenameHint]:
    """Return the YYMMDD triple found in the basename, or None.

    Only the year is used downstream; month and day are kept for callers that
    want to display the hint.
    """
    if not filename:
        return None
    # Uploads from Windows browsers may carry backslash paths
    base = PurePath(filename.replace("\\", "/")).name
    m = _SIX_DIGITS.search(base)
    if not m:
        return None
    digits = m.group(1)
    y = 2000 + int(digits[0:2])
    mo = int(digits[2:4])
    d = int(digits[4:6])
    if not mo or not d:
        return None
    return FilenameHint(y, mo, d)
