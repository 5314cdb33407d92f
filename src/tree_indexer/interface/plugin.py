from __future__ import annotations

"""
Host Agent Integration.

Exposes the indexer to an agent runtime: a callable 'tree_indexer' tool
with its argument schema, and a config hook that registers the bundled
command templates.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from tree_indexer.core.pipeline.engine import index_directory
from tree_indexer.core.pipeline.stages.validator import validate_config
from tree_indexer.core.services.commands import CommandTemplate, load_commands
from tree_indexer.domain.constants import TOOL_DESCRIPTION, TOOL_NAME

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ToolDefinition:
    """
    A tool callable by the host agent.

    Attributes:
        name: Registered tool name.
        description: Human-readable summary shown to the agent.
        args: JSON-schema style description of accepted arguments.
        execute: Callable receiving the argument mapping, returning text.
    """
    name: str
    description: str
    args: Dict[str, Dict[str, Any]]
    execute: Callable[[Mapping[str, Any]], str]


@dataclass
class PluginHooks:
    tools: Dict[str, ToolDefinition] = field(default_factory=dict)
    commands: List[CommandTemplate] = field(default_factory=list)

    def config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Register the loaded command templates in the host configuration.

        Args:
            config: Mutable host configuration; 'command' is created if absent.

        Returns:
            Dict[str, Any]: The same configuration object.
        """
        registry = config.get("command")
        if registry is None:
            registry = {}
            config["command"] = registry

        for cmd in self.commands:
            registry[cmd.name] = {
                "template": cmd.template,
                "description": cmd.frontmatter.description,
                "agent": cmd.frontmatter.agent,
                "model": cmd.frontmatter.model,
                "subtask": cmd.frontmatter.subtask,
            }
        return config

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

TOOL_ARGS: Dict[str, Dict[str, Any]] = {
    "path": {
        "type": "string",
        "optional": True,
        "description": "Root path to index (defaults to current directory)",
    },
    "maxFileSize": {
        "type": "number",
        "optional": True,
        "description": "Max file size in bytes",
    },
}


def create_plugin(
        directory: Optional[str] = None,
        command_dir: Optional[str] = None,
) -> PluginHooks:
    """
    Build the plugin hooks handed to the host runtime.

    Args:
        directory: Working directory of the host session; default tool path.
        command_dir: Template directory. Defaults to the bundled templates.

    Returns:
        PluginHooks: Tool registry plus the config hook.
    """
    current_dir = directory or os.getcwd()
    commands = load_commands(command_dir)

    def execute(args: Optional[Mapping[str, Any]] = None) -> str:
        args = dict(args or {})
        clean, warnings = validate_config({"max_file_size": args.get("maxFileSize")})
        for w in warnings:
            logger.warning(f"Tool argument constraint: {w}")
        return index_directory(
            path=args.get("path") or current_dir,
            max_file_size=clean["max_file_size"],
        )

    tool = ToolDefinition(
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        args=TOOL_ARGS,
        execute=execute,
    )
    logger.debug(f"Plugin initialized for {current_dir} with {len(commands)} command(s).")
    return PluginHooks(tools={TOOL_NAME: tool}, commands=commands)
