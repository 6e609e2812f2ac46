#!/usr/bin/env python3
"""
DDx Refine — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --service-url http://localhost:5000
"""

import argparse
import os


def main():
    parser = argparse.ArgumentParser(description='DDx Refine API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--service-url', default=None, help='Prediction service base URL')
    parser.add_argument('--catalog', default=None, help='Symptom catalog JSON file')
    parser.add_argument('--config', default=None, help='YAML config file')

    args = parser.parse_args()

    # APIConfig читає env при імпорті додатку
    if args.service_url:
        os.environ["PREDICTION_SERVICE_URL"] = args.service_url
    if args.catalog:
        os.environ["SYMPTOM_CATALOG_PATH"] = args.catalog
    if args.config:
        os.environ["DDX_CONFIG_PATH"] = args.config
    os.environ["API_HOST"] = args.host
    os.environ["API_PORT"] = str(args.port)

    print("=" * 60)
    print("🏥 DDx Refine — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print("=" * 60)

    import uvicorn

    uvicorn.run(
        "ddx_refine.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
