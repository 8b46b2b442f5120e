# Copyright (c) 2026 TempoOS Contributors. All Rights Reserved.

"""
Agent Prompt System — File-based system prompt resolution.

The default prompt lives as a Markdown template in configs/. It can be
replaced by a user file and written back to disk, both controlled by
environment signals (see prompt_loader).
"""
