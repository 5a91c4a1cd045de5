"""Card Chat - conversational credit card recommendations.

Combines httpx for talking to the recommendation backend, NiceGUI for the
chat page, FastAPI for hosting, and Pydantic for data validation.

Components:
    - chat: conversation state machine and CSV upload staging
    - client: backend transport and its configuration
    - parsing: reply annotation parsing and CSV-to-prompt formatting
    - api: HTTP endpoints (health, CSV prompt preview)
    - ui: Web interface observing the conversation state
    - models: Message and request/response schemas
"""

__version__ = "0.1.0"
