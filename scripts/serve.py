#!/usr/bin/env python3
"""Run the Terbilang API locally with uvicorn."""
import uvicorn

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from terbilang_api.api.app import create_app
from terbilang_api.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
