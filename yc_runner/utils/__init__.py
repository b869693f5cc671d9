"""
Generic helpers shared across modules.

Includes size/integer parsing and GitHub Actions workflow commands.
"""
