"""FastAPI endpoints for the chat client.

Endpoints:
    - GET /health: Service health status
    - POST /upload/csv: Spending history CSV to recommendation prompt
"""

from cardchat.api.app import app, create_app

__all__ = ["app", "create_app"]
