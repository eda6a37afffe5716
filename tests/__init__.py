"""
Test Suite for TableData.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Full render cycles through TableData
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
