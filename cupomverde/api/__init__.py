# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3

"""
Cupom Verde API Module
API client and the HTTP layer under it
"""

from cupomverde.api.client import (
    CupomVerdeClient,
    EnviarCupomFiscalResult,
    TipoImpressao,
)
from cupomverde.api.http_client import HTTPClient

__all__ = [
    "CupomVerdeClient",
    "EnviarCupomFiscalResult",
    "HTTPClient",
    "TipoImpressao",
]
