#!/usr/bin/env python3
"""
Run the HVAC intake API locally with uvicorn

    PORT=8080 RELOAD=true python run_server.py
"""
import os
import sys

import uvicorn

# Imports in the app are relative to backend/
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.environment import get_env_bool, get_env_int  # noqa: E402


def main():
    port = get_env_int("PORT", 8000)
    print(f"HVAC intake API on http://localhost:{port} (docs at /docs, health at /healthz)")
    try:
        uvicorn.run(
            "app.main:app",
            host=os.getenv("HOST", "0.0.0.0"),
            port=port,
            reload=get_env_bool("RELOAD", False),
            log_level="debug" if get_env_bool("DEBUG", False) else "info",
        )
    except KeyboardInterrupt:
        print("\nIntake API stopped")


if __name__ == "__main__":
    main()
