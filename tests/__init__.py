"""
Test suite for numeric-drills

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
