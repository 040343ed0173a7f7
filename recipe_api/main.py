import uvicorn

from .config import HOST, LOG_LEVEL, PORT, configure_logging


def main():
    configure_logging()
    uvicorn.run(
        "recipe_api.app:app",
        host=HOST,
        port=PORT,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
