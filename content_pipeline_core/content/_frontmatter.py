"""Front-matter splitting for Markdown content files.

A content file starts with a YAML block fenced by ``---`` lines (``= yaml =``
is also accepted as the opening marker, ``...`` as the closing one). The rest
of the file is the Markdown body.
"""

import re
from io import StringIO
from typing import Any

from ruamel.yaml import YAML

_FRONT_MATTER_RE = re.compile(
    r"\A\ufeff?(?P<fence>---|= yaml =)[ \t]*\r?\n(?P<yaml>.*?)^(?:(?P=fence)|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split raw file text into (attributes, body).

    Text without a front-matter block yields empty attributes and the
    whole text as body.

    Raises:
        ValueError: If the front-matter is not a YAML mapping.
        ruamel.yaml.YAMLError: If the front-matter is not valid YAML.
    """
    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        return {}, text

    body = text[match.end() :]
    raw = match.group("yaml")
    if not raw.strip():
        return {}, body

    yaml = YAML(typ="safe")
    data = yaml.load(StringIO(raw))
    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise ValueError(f"front-matter must be a mapping, got {type(data).__name__}")
    return {str(key): value for key, value in data.items()}, body
