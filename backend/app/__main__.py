"""
Run the API server.
Run with: python -m app  (from backend/)
"""

import uvicorn
from app.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
