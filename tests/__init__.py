"""
Test suite for hd-utility core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
