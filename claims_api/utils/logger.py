import logging

logger = logging.getLogger("claims_api")


def get_logger(name: str):
    # Module names already live under the package logger
    if name == logger.name or name.startswith(f"{logger.name}."):
        return logging.getLogger(name)
    return logger.getChild(name)
