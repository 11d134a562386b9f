"""
Javadoc block rendering.
"""

from typing import Optional

LINE_BREAK = "<br>"


def format_javadoc(text: Optional[str], indent: str = "", author: Optional[str] = None) -> str:
    """
    Render a ``/** ... */`` block.

    Each ``<br>``-separated segment of ``text`` becomes one comment line.
    An ``@author`` line, preceded by a blank comment line, is appended when
    ``author`` is given. Without text no block is produced at all.

    Args:
        text: Documentation text, ``<br>`` marks line breaks
        indent: Prefix applied to every line of the block
        author: Optional author name

    Returns:
        The comment block, or an empty string
    """
    if not text:
        return ""

    lines = [f"{indent}/**"]
    lines.extend(f"{indent} * {line}" for line in text.split(LINE_BREAK))

    if author:
        lines.append(f"{indent} *")
        lines.append(f"{indent} * @author {author}")

    lines.append(f"{indent} */")
    return "\n".join(lines)
