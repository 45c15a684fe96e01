import logging


def setup_logging(level: str = "INFO") -> None:
    # Root logger configuration, applied once at startup
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
