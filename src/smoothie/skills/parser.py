"""
Skill file parser for Smoothie.

Extracts metadata from the frontmatter of SKILL.blade.php files. Parsing is
pattern based and deliberately forgiving: a file that cannot be read or has
no folded description falls back to DEFAULT_DESCRIPTION.
"""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

SKILL_FILE = "SKILL.blade.php"
DEFAULT_DESCRIPTION = "A Smoothie Filament skill"

# Frontmatter must open the file and ends at the next --- line.
_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$",
    re.DOTALL | re.MULTILINE,
)

# The folded (>-) value starts on the line after the marker and runs until the
# next top-level key or the end of the header.
_DESCRIPTION_PATTERN = re.compile(
    r"^description:\s*>-\s*\n\s*(.+?)(?:\n[A-Za-z_][\w-]*:|\Z)",
    re.DOTALL | re.MULTILINE,
)

_WHITESPACE = re.compile(r"\s+")


def extract_description(content: str) -> str:
    """Extract the folded description from skill file frontmatter.

    Args:
        content: Full contents of a skill file.

    Returns:
        The trimmed description, or DEFAULT_DESCRIPTION if none was found.
    """
    header = _FRONTMATTER_PATTERN.search(content)
    if header is None:
        return DEFAULT_DESCRIPTION

    match = _DESCRIPTION_PATTERN.search(header.group(1))
    if match is None:
        return DEFAULT_DESCRIPTION

    description = match.group(1).strip()
    return description or DEFAULT_DESCRIPTION


def read_description(skill_file: Path) -> str:
    """Read a skill file and extract its description.

    Args:
        skill_file: Path to a SKILL.blade.php file.

    Returns:
        The description, or DEFAULT_DESCRIPTION if the file is unreadable.
    """
    try:
        content = skill_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {skill_file}: {e}")
        return DEFAULT_DESCRIPTION

    return extract_description(content)


def normalize_description(description: str) -> str:
    """Collapse a multi-line description into a single line."""
    return _WHITESPACE.sub(" ", description.strip())
