"""Application entry point for the raffle code server."""

from rafflecode.app import App
from rafflecode.config import Config
from rafflecode.logging import setup_logging
from rafflecode.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
