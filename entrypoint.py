"""Backend entrypoint; starts uvicorn with host/port from env."""
import os
import uvicorn

from folio.main import app


def main() -> None:
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "5000"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
