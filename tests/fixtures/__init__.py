"""
Test Fixtures - Shared Test Data.

    - patients.py: builders for patients, queries and raw dataset records

Usage:
    Import builders directly or use the pytest fixtures in conftest.py.
"""
