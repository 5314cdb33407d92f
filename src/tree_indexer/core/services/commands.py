from __future__ import annotations

"""
Command Template Loader.

Reads the markdown command templates exposed to the host agent. Each file
may start with a '---' delimited header of 'key: value' lines followed by
the template body.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

BUNDLED_COMMANDS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "commands")

_FRONTMATTER_RX = re.compile(r"^---\n([\s\S]*?)\n---\n([\s\S]*)$")

# -----------------------------------------------------------------------------
# MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandFrontmatter:
    description: Optional[str] = None
    agent: Optional[str] = None
    model: Optional[str] = None
    subtask: Optional[bool] = None


@dataclass(frozen=True)
class CommandTemplate:
    """
    A loaded command template.

    Attributes:
        name: Relative path without '.md', separators replaced by '-'.
        frontmatter: Parsed header values.
        template: Body text of the template.
    """
    name: str
    frontmatter: CommandFrontmatter = field(default_factory=CommandFrontmatter)
    template: str = ""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_frontmatter(content: str) -> Tuple[CommandFrontmatter, str]:
    """
    Split a template file into its header values and body.

    Only 'description', 'agent', 'model' and 'subtask' are recognised;
    'subtask' is True only for the literal 'true'. Lines without a colon
    are ignored.

    Args:
        content: Raw file text.

    Returns:
        Tuple[CommandFrontmatter, str]: Header values and stripped body.
    """
    match = _FRONTMATTER_RX.match(content.replace("\r\n", "\n"))
    if not match:
        return CommandFrontmatter(), content.strip()

    header, body = match.groups()
    values = {}
    for line in header.split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if key in ("description", "agent", "model"):
            values[key] = value
        elif key == "subtask":
            values[key] = value == "true"

    return CommandFrontmatter(**values), body.strip()


def load_commands(command_dir: Optional[str] = None) -> List[CommandTemplate]:
    """
    Load every '*.md' template below a directory.

    Args:
        command_dir: Directory to scan. Defaults to the bundled templates.

    Returns:
        List[CommandTemplate]: Templates sorted by name.
    """
    base = Path(command_dir or BUNDLED_COMMANDS_DIR)
    if not base.is_dir():
        logger.debug(f"Command directory not found: {base}")
        return []

    commands: List[CommandTemplate] = []
    for file_path in sorted(base.rglob("*.md")):
        if not file_path.is_file():
            continue
        text = file_path.read_text(encoding="utf-8")
        frontmatter, body = parse_frontmatter(text)
        relative = file_path.relative_to(base).as_posix()
        name = relative[: -len(".md")].replace("/", "-")
        commands.append(CommandTemplate(name=name, frontmatter=frontmatter, template=body))

    logger.debug(f"Loaded {len(commands)} command template(s) from {base}")
    return sorted(commands, key=lambda c: c.name)
