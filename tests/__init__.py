"""
Test suite for gesturepath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
