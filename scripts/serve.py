#!/usr/bin/env python3
"""
Run the Transaction Dashboard API with uvicorn.

Binds to HOST/PORT from the environment (default 0.0.0.0:3000).

Usage:
    python scripts/serve.py
    python scripts/serve.py --reload
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from api.config import Settings


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the Transaction Dashboard API")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change (development only)"
    )
    args = parser.parse_args()

    settings = Settings.from_env()
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
