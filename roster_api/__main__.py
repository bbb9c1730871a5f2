# roster_api/__main__.py
import uvicorn

from roster_api.core.config import settings


def main():
    uvicorn.run("roster_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
