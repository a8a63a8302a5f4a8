"""Run the outline2mm API with ``python -m server``."""

import uvicorn

from outline2mm.config import MINDMAP_FILENAME
from outline2mm.utils.logging_config import get_logger
from server.server_config import HOST, MAX_INPUT_CHARS, PORT, RELOAD

logger = get_logger(__name__)


def main() -> None:
    """Start uvicorn with the settings from ``server.server_config``."""
    logger.info(
        "Starting outline2mm API",
        extra={
            "host": HOST,
            "port": PORT,
            "reload": RELOAD,
            "max_input_chars": MAX_INPUT_CHARS,
            "mindmap_filename": MINDMAP_FILENAME,
        },
    )
    # log_config=None keeps the rich handler installed by get_logger.
    uvicorn.run("server.main:app", host=HOST, port=PORT, reload=RELOAD, log_config=None)


if __name__ == "__main__":
    main()
