"""CLI entrypoint to run the CampusPlay FastAPI server."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    port = int(os.getenv("PORT", "8000"))
    host = os.getenv("HOST", "0.0.0.0")
    uvicorn.run("campusplay.api.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":  # pragma: no cover
    main()
