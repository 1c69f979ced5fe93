"""
Test suite for sciengine

Contains:
- tests/unit/          : Unit tests for individual modules and the full pipeline
"""
