#!/usr/bin/env python3
"""
Test suite for the KFN scoring engine.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

The engine performs no I/O, so no external services are required.
"""
