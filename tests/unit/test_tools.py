# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.
"""Unit tests for the tool name registry."""

import logging
from string import Template

from plan_auditor.agents.prompt_loader import DEFAULT_PROMPT_TEMPLATE
from plan_auditor.agents.tools import SHELL_TOOL, TOOL_NAMES, get_tool_names


class TestToolNames:
    def test_known_placeholders(self):
        names = get_tool_names(["shell_tool", "read_file_tool"])
        assert names == {"shell_tool": SHELL_TOOL, "read_file_tool": "read_file"}

    def test_unknown_placeholder_skipped_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="plan_auditor.agents.tools"):
            names = get_tool_names(["shell_tool", "teleport_tool"])
        assert "teleport_tool" not in names
        assert "teleport_tool" in caplog.text

    def test_registry_values_unique(self):
        assert len(set(TOOL_NAMES.values())) == len(TOOL_NAMES)

    def test_registry_matches_template_placeholders(self):
        template = Template(DEFAULT_PROMPT_TEMPLATE.read_text(encoding="utf-8"))
        assert set(template.get_identifiers()) == set(TOOL_NAMES)
