# -*- coding: utf-8 -*-
# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3

"""
Logging Utilities for Cupom Verde

All SDK loggers live under the ``cupomverde`` namespace so the host
application decides where (and whether) they go. CPFs are masked before a
record reaches any handler.
"""

from __future__ import annotations

import logging
import re
from typing import Any

LOGGER_NAME = "cupomverde"

_CPF_RE = re.compile(r"(?<!\d)(?:\d{11}|\d{3}\.\d{3}\.\d{3}-\d{2})(?!\d)")


def mask_cpf(text: str) -> str:
    """Replace CPF patterns in a string by ``***CPF***``."""
    if not text:
        return text
    return _CPF_RE.sub("***CPF***", text)


class MaskCPFFilter(logging.Filter):
    """Logging filter to mask CPFs in log messages and ``cpf`` extras."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = mask_cpf(record.getMessage())
        record.args = ()

        value: Any = getattr(record, "cpf", None)
        if isinstance(value, str):
            record.cpf = mask_cpf(value)

        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a Cupom Verde logger.

    Args:
        name: Sub-logger name, e.g. ``"http"`` for ``cupomverde.http``

    Returns:
        logging.Logger: Logger with CPF masking attached
    """
    logger = logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)
    if not any(isinstance(f, MaskCPFFilter) for f in logger.filters):
        logger.addFilter(MaskCPFFilter())
    return logger
