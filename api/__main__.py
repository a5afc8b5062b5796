"""Run the Bookshelf API with uvicorn: ``python -m api``."""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "api.app:app",
        host=os.getenv("BOOKSHELF_HOST", "127.0.0.1"),
        port=int(os.getenv("BOOKSHELF_PORT", "8000")),
        reload=os.getenv("BOOKSHELF_RELOAD", "false").lower() == "true",
    )


if __name__ == "__main__":
    main()
