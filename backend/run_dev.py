"""run_dev.py — Start Eventmi in development mode.

Equivalent CLI command (run from backend/):
    uvicorn api.main:app --reload --host 127.0.0.1 --port 8000

The --reload flag watches for file changes and restarts automatically.
"""

import uvicorn

from core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
