"""
➡️ But : Configurer les logs une seule fois pour toute l'application.

Les modules récupèrent leur logger avec logging.getLogger(__name__)
et n'ont pas à se soucier du format ni du niveau.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # uvicorn garde ses propres handlers, on aligne juste le niveau
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level.upper())
