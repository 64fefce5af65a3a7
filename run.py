#!/usr/bin/env python3
"""Run the GraphQL server, or the Streamlit dashboard with `run.py dashboard`."""

import subprocess
import sys
from pathlib import Path

import uvicorn

import settings
from settings.logging import setup_logging

if __name__ == "__main__":
    if sys.argv[1:] == ["dashboard"]:
        app = Path(__file__).parent / "web" / "streamlit" / "app.py"
        subprocess.run([sys.executable, "-m", "streamlit", "run", str(app)])
    else:
        setup_logging(level=settings.LOG_LEVEL)
        uvicorn.run("web.server:app", host=settings.HOST, port=settings.PORT)
