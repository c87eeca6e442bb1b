"""Domain layer — patterns, parsers, and value types.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
Every parser is a pure function of its string input.
"""
