"""
DuckQuest — Web API configuration.
"""
import os

# Web API
WEB_HOST = os.environ.get("DUCKQUEST_WEB_HOST", "127.0.0.1")
WEB_PORT = int(os.environ.get("DUCKQUEST_WEB_PORT", "5000"))

# Hard cap on free-text fields accepted from JSON bodies
MAX_TEXT_LENGTH = 4000
