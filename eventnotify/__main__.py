"""Run the EventNotify server: ``python -m eventnotify``."""

import uvicorn

from eventnotify.config.settings import EventNotifyConfig


def main() -> None:
    config = EventNotifyConfig.from_environment()
    uvicorn.run(
        "eventnotify.api.main:app",
        host=config.host,
        port=config.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
