"""
Test Suite for Patient Directory.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Pipeline and HTTP API tests
    - performance/: Timing benchmarks
    - fixtures/: Shared builders for patients, queries and records

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m "not slow"                    # Skip long benchmarks
"""
