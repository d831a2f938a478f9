"""Entry point for running the dashboard API with uvicorn.

    python main.py

Serves `dashboard_api.main:app`; `GET /seed` populates the store named by
POSTGRES_URL.
"""
import os

from dashboard_api.main import app

__all__ = ["app"]


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
