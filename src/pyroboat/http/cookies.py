"""Cookie file parsing utilities.

Supports the Netscape cookie file format used by browsers and tools like
curl, as well as a plain file holding only the .ROBLOSECURITY value.
"""

from pathlib import Path
from typing import Optional

ROBLOSECURITY_COOKIE = ".ROBLOSECURITY"


def load_roblosecurity_from_file(cookie_file: str) -> Optional[str]:
    """Load the .ROBLOSECURITY cookie value from a file.

    The Netscape cookie format is:
    # domain flag path secure expiration name value

    Any file whose first non-comment line is not a 7-column cookie row is
    treated as holding the raw cookie value.

    Args:
        cookie_file: Path to cookie file

    Returns:
        The cookie value, or None if the file does not exist or has no
        .ROBLOSECURITY entry

    Example file format:
        # Netscape HTTP Cookie File
        .roblox.com    TRUE    /    TRUE    1735689600    .ROBLOSECURITY    _|WARNING...
    """
    cookie_path = Path(cookie_file)

    if not cookie_path.exists():
        return None

    lines = []
    with open(cookie_path, 'r') as f:
        for line in f:
            line = line.strip()

            # Skip comments and empty lines
            if not line or line.startswith('#'):
                continue
            lines.append(line)

    if not lines:
        return None

    if len(lines) == 1 and len(lines[0].split('\t')) < 7:
        value = lines[0]
        prefix = f"{ROBLOSECURITY_COOKIE}="
        if value.startswith(prefix):
            value = value[len(prefix):]
        return value or None

    for line in lines:
        parts = line.split('\t')
        if len(parts) < 7:
            continue

        name, value = parts[5], parts[6]
        if name == ROBLOSECURITY_COOKIE and value:
            return value

    return None
