"""
Main Entry Point for the Six Cities API

Run the FastAPI application with uvicorn.
"""

import uvicorn

from sixcities.config.settings import Settings

if __name__ == "__main__":
    uvicorn.run(
        "sixcities.api.app:create_app",
        factory=True,
        host=Settings.HOST,
        port=Settings.PORT,
        reload=True  # Enable auto-reload for development
    )
