"""
Test suite for the rational approximator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
