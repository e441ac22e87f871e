# main.py

from argparse import ArgumentParser

from uvicorn import run


def main() -> None:
    parser = ArgumentParser(description="Run the Inkwell backend")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--workers", type=int, default=1)
    args = parser.parse_args()

    run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=None if args.reload else args.workers,
        log_level="info",
        loop="uvloop",
        http="httptools",
    )


if __name__ == "__main__":
    main()
