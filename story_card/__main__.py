"""Main module for story_card MCP server.

This module allows the server to be run as a Python module using:
python -m story_card

It delegates to the server application's main function.
"""

from story_card.server.app import main

if __name__ == "__main__":
    main()
