"""
Test suite for the Math Library

Contains:
- tests/unit/          : Unit tests for individual modules and backends
"""
