"""
Test suite for astrocoord

Contains:
- tests/unit/          : Unit tests for the kernel, safeguards and representations
"""
