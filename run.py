#!/usr/bin/env python3
"""
Run script for the Messages API
"""
import uvicorn

from messages_api.config import get_settings
from messages_api.main import create_app

if __name__ == "__main__":
    settings = get_settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)
