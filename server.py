from __future__ import annotations

import os

import uvicorn


if __name__ == "__main__":
    host = os.getenv("PITCHLENS_HOST", "127.0.0.1")
    port = int(os.getenv("PITCHLENS_PORT", os.getenv("PORT", "8000")))
    log_level = os.getenv("PITCHLENS_LOG_LEVEL", "info").strip().lower()
    uvicorn.run(
        "src.backend.main:app",
        host=host,
        port=port,
        log_level=log_level,
        reload=os.getenv("PITCHLENS_RELOAD", "0") == "1",
    )
