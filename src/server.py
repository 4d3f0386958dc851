"""Shelfwise HTTP server runner.

Usage:
    python src/server.py                 # Serve on 0.0.0.0:8000
    python src/server.py --port 9000 --reload
"""

import argparse

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Shelfwise HTTP server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args()

    # Logging is configured by the app factory against the domain's [logging] section.
    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload, log_config=None)


if __name__ == "__main__":
    main()
