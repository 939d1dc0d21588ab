#    Modified for qstates
#    Summary of changes: Replaced the simulator timestamp prefix with a per-call
#    context label; renamed the log level environment variable.
#
#    This file is based on a snapshot of SimQN (https://github.com/QNLab-USTC/SimQN),
#    which is licensed under the GNU General Public License v3.0.
#
#    The original SimQN header is included below.


#    SimQN: a discrete-event simulator for the quantum networks
#    Copyright (C) 2021-2022 Lutong Chen, Jian Li, Kaiping Xue
#    University of Science and Technology of China, USTC.
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.

import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from logging import Logger, LoggerAdapter, StreamHandler, getLogger
from typing import Literal, cast, override


class StatesLogAdapter(LoggerAdapter):
    def __init__(self, logger: Logger):
        super().__init__(logger)
        self._context: ContextVar[str | None] = ContextVar(f"{logger.name}.context", default=None)

    @override
    def process(self, msg, kwargs):
        if label := self._context.get():
            msg = f"[{label}] {msg}"
        return msg, kwargs

    @contextmanager
    def context(self, label: str) -> Iterator[None]:
        """
        Prepend ``label`` to log entries emitted within the context.

        The label is local to the current thread or asyncio task.
        """
        token = self._context.set(label)
        try:
            yield None
        finally:
            self._context.reset(token)

    def set_default_level(self, dflt_level: Literal["CRITICAL", "FATAL", "ERROR", "WARN", "INFO", "DEBUG"]):
        """
        Configure logging level.

        If `QSTATES_LOGLVL` environment variable contains a valid log level, it is used.
        Otherwise, `dflt_level` is used as the logging level.
        """
        try:
            env_level = os.getenv("QSTATES_LOGLVL", dflt_level)
            self.setLevel(env_level)
        except ValueError:  # QSTATES_LOGLVL is not a valid level
            self.setLevel(dflt_level)


log = StatesLogAdapter(getLogger("qstates"))
"""
The default ``logger`` used by qstates.
"""

log.set_default_level("INFO")
cast(Logger, log.logger).addHandler(StreamHandler(sys.stdout))
