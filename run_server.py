#!/usr/bin/env python
"""
Server Entry Point

Starts the navigation API with uvicorn.
Usage:
    Development:  python run_server.py --dev
    Production:   python run_server.py
    
    Custom snapshot:
    NAVIGATOR_SNAPSHOT_PATH=./data/other.json python run_server.py
"""

import argparse
import os

import uvicorn


def run_dev_server(port: int):
    """Run development server with auto-reload."""
    uvicorn.run(
        "marketplace_navigator.main:app",
        host="127.0.0.1",
        port=port,
        reload=True,
        reload_dirs=["marketplace_navigator"],
        log_level="debug",
        access_log=True,
    )


def run_prod_server(port: int):
    """Run production server."""
    uvicorn.run(
        "marketplace_navigator.main:app",
        host="0.0.0.0",
        port=port,
        workers=int(os.getenv("WORKERS", 2)),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
        access_log=True,
        proxy_headers=True,
        forwarded_allow_ips="*",
        server_header=False,
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Marketplace Navigator API Server")
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run in development mode with auto-reload"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", 8000)),
        help="Port to run on (default: 8000)"
    )
    
    args = parser.parse_args()
    
    if args.dev:
        print("🚀 Starting development server...")
        run_dev_server(args.port)
    else:
        print("🚀 Starting production server...")
        run_prod_server(args.port)
