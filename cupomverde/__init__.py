# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3

"""
Cupom Verde - Python SDK for the Cupom Verde fiscal receipt API

    from cupomverde import CPV, ConflictError

    CPV.init()  # reads CPV_API_KEY
    result = CPV.enviar_cupom_fiscal(xml_base64, cpf)
    CPV.cancelar_cupom_fiscal(result["chave"])

Environment:
- CPV_API_KEY: default API key
- CPV_API_URL: API base URL override
"""

import logging

from cupomverde.api.client import (
    CupomVerdeClient,
    EnviarCupomFiscalResult,
    TipoImpressao,
)
from cupomverde.exceptions import (
    ConflictError,
    CupomVerdeError,
    ErrorKind,
    NotFoundError,
    UnauthorizedError,
    UnexpectedError,
    ValidationError,
)
from cupomverde.utils.config import ClientConfig

__version__ = "2.0.0"

logging.getLogger("cupomverde").addHandler(logging.NullHandler())

# Shared instance; configure once with CPV.init()
CPV = CupomVerdeClient()

__all__ = [
    "CPV",
    "ClientConfig",
    "ConflictError",
    "CupomVerdeClient",
    "CupomVerdeError",
    "EnviarCupomFiscalResult",
    "ErrorKind",
    "NotFoundError",
    "TipoImpressao",
    "UnauthorizedError",
    "UnexpectedError",
    "ValidationError",
    "__version__",
]
