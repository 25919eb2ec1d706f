"""
Engine Tests Package
====================
Test suite for the SymCorrect correction engine.

Run all tests: python3 -m pytest tests/engine/ -v
Run specific: python3 -m pytest tests/engine/test_symspell.py -v
"""

__version__ = "1.0.0"
