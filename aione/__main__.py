"""Run the API with uvicorn: python -m aione"""

import uvicorn

from aione.core.config import settings


def main() -> None:
    uvicorn.run("aione.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
