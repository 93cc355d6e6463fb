from __future__ import annotations

import uvicorn

from morphokey.core.config import load_settings
from morphokey.main import create_app


def main() -> None:
    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
