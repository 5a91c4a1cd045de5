"""Test package for Card Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end workflow tests over HTTP
    - data/: Sample CSV files

Leverages pytest with pytest-check for soft assertions.
"""
