"""Integration tests for components working together as a system.

Coverage:
    - API endpoints with real HTTP requests
    - CSV uploads with actual sample files
    - Full chat workflow from upload to reply against an in-process backend

No network access needed: backends run in-process through ASGITransport.
"""
