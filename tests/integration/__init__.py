"""
Integration Tests - End-to-End Grid Tests.

These tests verify that all modules work together over full render
cycles, locally and against a mocked remote source.

Test Files:
    - test_grid.py: GridCore / TableData workflows
"""
