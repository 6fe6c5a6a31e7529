#!/usr/bin/env python3
"""
Entry point for running the Finance Tracker API server.

Usage:
    python run.py [--port PORT] [--host HOST] [--seed-demo]
"""

import argparse
import os
import webbrowser
import qrcode
import uvicorn


def print_qr_code(url: str) -> None:
    """Print a QR code to the terminal."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=1,
    )
    qr.add_data(url)
    qr.make(fit=True)

    # Print QR code using ASCII
    qr.print_ascii(invert=True)


def main():
    parser = argparse.ArgumentParser(description="Finance Tracker")
    parser.add_argument("--port", type=int, default=8000, help="Port to run on")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--database-url", help="SQLAlchemy database URL")
    parser.add_argument("--seed-demo", action="store_true", help="Load demo data into an empty database")
    parser.add_argument("--no-browser", action="store_true", help="Don't open the API docs")
    args = parser.parse_args()

    # Settings are read from the environment by the (possibly reloaded) server process
    if args.database_url:
        os.environ["FINANCE_DATABASE_URL"] = args.database_url
    if args.seed_demo:
        os.environ["FINANCE_SEED_DEMO_DATA"] = "1"

    url = f"http://{args.host}:{args.port}"

    print("\n" + "=" * 50)
    print("  Finance Tracker")
    print("=" * 50)
    print(f"\n  URL:  {url}")
    print(f"  Docs: {url}/docs\n")

    try:
        print_qr_code(url)
    except Exception:
        pass  # QR code is optional

    print("\n  Press Ctrl+C to stop the server\n")
    print("=" * 50 + "\n")

    if not args.no_browser:
        webbrowser.open(f"{url}/docs")

    uvicorn.run(
        "finance_tracker.main:app",
        host=args.host,
        port=args.port,
        reload=True,
        log_level="info"
    )


if __name__ == "__main__":
    main()
