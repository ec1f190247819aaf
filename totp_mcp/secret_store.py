"""Local secrets file loader.

The secrets file holds one ``KEY=value`` pair per line. Keys are upper-case
letters and underscores; anything else on a line is ignored. The file is
re-read on every call so rotated secrets are picked up immediately.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Union

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"^([A-Z_]+)=(.+)$")


def parse_secrets(content: str) -> Dict[str, str]:
    """Parse ``KEY=value`` lines from the secrets file text.

    Args:
        content: Raw file content.

    Returns:
        Mapping of key name to trimmed value. Malformed lines are skipped.
    """
    secrets: Dict[str, str] = {}
    for line in content.split("\n"):
        match = _LINE_RE.match(line)
        if match:
            secrets[match.group(1)] = match.group(2).strip()
    return secrets


def load_secrets(path: Union[str, Path]) -> Dict[str, str]:
    """Read and parse the secrets file at ``path``.

    Read failures are logged and reported as an empty mapping, so callers see
    every key as missing rather than an I/O error.

    Args:
        path: Location of the secrets file.

    Returns:
        Mapping of key name to value; empty if the file cannot be read.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to load secrets: {e}")
        return {}
    return parse_secrets(content)
