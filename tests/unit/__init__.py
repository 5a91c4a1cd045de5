"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Reply annotation and CSV-to-prompt formatting
    - client/: Configuration and HTTP transport
    - chat/: Conversation state machine and upload staging
"""
