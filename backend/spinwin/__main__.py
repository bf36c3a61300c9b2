import uvicorn

from spinwin.core.config import settings


def main() -> None:
    uvicorn.run('spinwin.main:app', host=settings.HOST, port=settings.PORT)


if __name__ == '__main__':
    main()
