"""MCP server package initialization"""

from story_card.server.app import create_mcp_server, register_tools

__all__ = ["create_mcp_server", "register_tools"]
