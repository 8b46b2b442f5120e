# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Tool Names — identifiers of the agent's tools as the model sees them.

The default system prompt refers to tools through ``${placeholder}``
slots; this registry supplies the literal names substituted into them.
"""

from __future__ import annotations

import logging
from typing import Dict, List

logger = logging.getLogger("plan_auditor.agents.tools")

LS_TOOL = "list_directory"
READ_FILE_TOOL = "read_file"
SHELL_TOOL = "run_shell_command"
WRITE_FILE_TOOL = "write_file"

TOOL_NAMES: Dict[str, str] = {
    "ls_tool": LS_TOOL,
    "read_file_tool": READ_FILE_TOOL,
    "shell_tool": SHELL_TOOL,
    "write_file_tool": WRITE_FILE_TOOL,
}


def get_tool_names(placeholders: List[str]) -> Dict[str, str]:
    """Return the substitution map restricted to the given placeholders."""
    names = {}
    for placeholder in placeholders:
        if placeholder in TOOL_NAMES:
            names[placeholder] = TOOL_NAMES[placeholder]
        else:
            logger.warning("Requested tool placeholder '%s' not found in registry", placeholder)
    return names
