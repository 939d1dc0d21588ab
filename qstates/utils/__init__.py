from qstates.utils.logger import log

__all__ = [
    "log",
]
