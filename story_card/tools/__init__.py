"""MCP tools for story_card."""
