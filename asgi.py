"""
Module-level app for ASGI servers:

    uvicorn asgi:app --port 3000
"""

from app import create_app

app = create_app()
