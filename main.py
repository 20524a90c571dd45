# main.py

from uvicorn import run

from app.configs import settings


def main() -> None:
    run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info",
    )


if __name__ == "__main__":
    main()
