import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(_FORMAT))


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger("cardcycle")
    root.setLevel(level.upper())
    if _handler not in root.handlers:
        root.addHandler(_handler)
