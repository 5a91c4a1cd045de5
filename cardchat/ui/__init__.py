"""NiceGUI interface - thin visualization layer for the conversation.

Responsibilities:
    - Chat message display with a loading indicator
    - CSV upload button that stages a prompt in the input box
    - Error notifications for failed sends and rejected files

Subscribes to ConversationState and re-renders on change. Holds no
conversation logic of its own.
"""
