import logging
import sys

from toplangs.config import load_config
from toplangs.errors import TopLangsError
from toplangs.pipeline import run

logger = logging.getLogger("toplangs")


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)
    try:
        config = load_config(argv)
        if config.verbose:
            logger.setLevel(logging.DEBUG)
        run(config)
    except (TopLangsError, OSError) as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
