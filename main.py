"""
Main Entry Point (Root Level)

Alternative entry point at root level.
"""

import uvicorn

from sixcities.config.settings import Settings

if __name__ == "__main__":
    uvicorn.run(
        "sixcities.api.app:create_app",
        factory=True,
        host=Settings.HOST,
        port=Settings.PORT,
        reload=True
    )
