import logging
import sys

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Attach a stdout handler to the root logger, once per process."""
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers (uvicorn or pytest may have installed some)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        root.addHandler(handler)

    _configured = True
