"""
Unit Tests for capture_chess

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_movegen.py

    # Run with coverage
    pytest tests/ --cov=capture_chess --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestAlphaBeta::test_matches_full_width_minimax

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
