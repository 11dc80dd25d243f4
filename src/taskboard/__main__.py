"""Entry point for taskboard CLI."""

import logging
import sys

from taskboard.constants import APP_NAME, USAGE

logger = logging.getLogger(__name__)


def error(message: str) -> None:
    """Print error to stderr and exit 1."""
    print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if args:
        if args[0] in ("-h", "--help"):
            print(USAGE)
        else:
            print(f"Unknown argument '{args[0]}'. See '{APP_NAME} --help'.")
        return 0

    from taskboard.config import Config
    from taskboard.errors import StorageError
    from taskboard.logs import setup_logging
    from taskboard.storage import StateFile, load_or_create
    from taskboard.ui import TaskboardApp

    config = Config.from_env()
    setup_logging(config)
    state = StateFile(config.state_path)
    try:
        board = load_or_create(state, config.columns)
    except StorageError as e:
        logger.error("fatal: %s", e)
        error(str(e))

    app = TaskboardApp(board, state)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
