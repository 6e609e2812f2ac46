#!/usr/bin/env python3
"""
DDx Refine — Web UI

Запуск:
    python scripts/run_web.py
    python scripts/run_web.py --api-url http://localhost:8000 --port 8501
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

APP = Path(__file__).resolve().parent.parent / "ddx_refine" / "web_ui" / "app.py"


def main():
    parser = argparse.ArgumentParser(description="DDx Refine Web UI")
    parser.add_argument("--port", type=int, default=8501)
    parser.add_argument("--api-url", default=os.getenv("DDX_API_URL", "http://localhost:8000"),
                        help="REST API, яким користується сторінка")
    args = parser.parse_args()

    print(f"🏥 DDx Refine UI → http://localhost:{args.port} (API: {args.api_url})")

    env = dict(os.environ, DDX_API_URL=args.api_url)
    cmd = [sys.executable, "-m", "streamlit", "run", str(APP), "--server.port", str(args.port)]

    try:
        sys.exit(subprocess.call(cmd, env=env))
    except KeyboardInterrupt:
        print("\n🛑 Зупинено")


if __name__ == "__main__":
    main()
