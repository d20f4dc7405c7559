# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3
"""
Cupom Verde API Client

Submits and cancels fiscal receipts ("cupons fiscais") on the Cupom Verde
API. Inputs are validated locally; every failure is raised as one of the
errors in cupomverde.exceptions.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, TypedDict
from urllib.parse import quote

import requests

from cupomverde.api.http_client import HTTPClient
from cupomverde.exceptions import (
    CupomVerdeError,
    UnauthorizedError,
    UnexpectedError,
    error_from_status,
)
from cupomverde.utils.config import DEFAULT_API_URL, ClientConfig, load_settings
from cupomverde.utils.logging import get_logger
from cupomverde.utils.validators import (
    API_KEY_NOT_INFORMED,
    normalize_cpf,
    validate_api_key,
    validate_receipt_key,
    validate_receipt_submission,
)

logger = get_logger("client")

UPLOAD_PATH = "/integracao/upload"
CANCEL_PATH = "/integracao/cancelamentos/{chave}"


class TipoImpressao(str, Enum):
    """Printing mode decided by Cupom Verde for a submitted receipt."""

    NAO_IMPRIMIR = "NAO_IMPRIMIR"  # receipt must not be printed
    REDUZIDO = "REDUZIDO"  # print the reduced receipt


class EnviarCupomFiscalResult(TypedDict):
    """Response body of a successful submission.

    Keys:
        chave: Receipt key
        impressao: "NAO_IMPRIMIR" or "REDUZIDO" (see TipoImpressao)
        mensagem: Message the partner configured for each receipt
    """

    chave: str
    impressao: Literal["NAO_IMPRIMIR", "REDUZIDO"]
    mensagem: str


class CupomVerdeClient:
    """
    Cupom Verde API client.

    ``init`` must be called before any other method; it can be called again
    to switch keys and the last call wins. Re-initialising while requests are
    in flight on other threads is not synchronised.

    Example:
        cpv = CupomVerdeClient()
        cpv.init("56c1f1b8-9b5c-41cd-b8f7-872be3500ad3")
        result = cpv.enviar_cupom_fiscal("Q3Vwb21WZXJkZQ==", "529.982.247-25")
        if result["impressao"] == TipoImpressao.REDUZIDO:
            print_reduced_receipt()
    """

    def __init__(self, api_key: str | None = None):
        """Initialize client, configuring it right away when a key is given"""
        self._config: ClientConfig | None = None
        self._http: HTTPClient | None = None
        if api_key:
            self.init(api_key)

    def __enter__(self) -> "CupomVerdeClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def config(self) -> ClientConfig | None:
        return self._config

    @property
    def api_key(self) -> str | None:
        return self._config.api_key if self._config else None

    @property
    def base_url(self) -> str | None:
        return self._config.base_url if self._config else None

    def init(self, api_key: str | None = None):
        """
        Configure the client.

        Args:
            api_key: Cupom Verde API key; defaults to ``CPV_API_KEY``

        Raises:
            UnauthorizedError: No key given and ``CPV_API_KEY`` not set
            ValidationError: The key is not a UUID
        """
        settings = load_settings()
        resolved_key = api_key or settings.api_key

        if not resolved_key:
            raise UnauthorizedError(API_KEY_NOT_INFORMED)
        validate_api_key(resolved_key).raise_if_invalid()

        config = ClientConfig(
            api_key=resolved_key,
            base_url=settings.api_url or DEFAULT_API_URL,
        )
        previous = self._http
        self._http = HTTPClient(config)
        self._config = config
        if previous is not None:
            previous.close()

        logger.info("Cupom Verde SDK configured for %s", config.base_url)

    def close(self):
        """Release the HTTP session; ``init`` must be called again afterwards."""
        if self._http is not None:
            self._http.close()
        self._http = None
        self._config = None

    def enviar_cupom_fiscal(self, xml_cupom_fiscal: str, cpf_cliente: str) -> EnviarCupomFiscalResult:
        """
        Submit a fiscal receipt.

        Args:
            xml_cupom_fiscal: Receipt XML encoded in Base64
            cpf_cliente: Customer CPF, digits or formatted (000.000.000-00)

        Returns:
            EnviarCupomFiscalResult: Response body, unchanged

        Raises:
            UnauthorizedError: API key must be valid
            NotFoundError: The receipt's store must exist in Cupom Verde
            ConflictError: Two receipts with the same key cannot be sent
            ValidationError: XML and CPF must be valid; XML up to 1 Mb
            UnexpectedError: Any other failure
        """
        validate_receipt_submission(xml_cupom_fiscal, cpf_cliente).raise_if_invalid()
        http = self._require_http()

        response = self._send(
            http,
            UPLOAD_PATH,
            conflict_allowed=True,
            json={"xml": xml_cupom_fiscal, "cpf": normalize_cpf(cpf_cliente)},
        )
        try:
            return response.json()
        except ValueError as e:
            raise UnexpectedError(status_code=response.status_code) from e

    def cancelar_cupom_fiscal(self, chave_cupom_fiscal: str):
        """
        Change a fiscal receipt's status to cancelled.

        Args:
            chave_cupom_fiscal: Receipt key

        Raises:
            UnauthorizedError: API key must be valid
            NotFoundError: The receipt's store must exist in Cupom Verde
            ValidationError: The key must be informed
            UnexpectedError: Any other failure
        """
        validate_receipt_key(chave_cupom_fiscal).raise_if_invalid()
        http = self._require_http()

        self._send(
            http,
            CANCEL_PATH.format(chave=quote(chave_cupom_fiscal, safe="")),
            conflict_allowed=False,
        )

    submit = enviar_cupom_fiscal
    cancel = cancelar_cupom_fiscal

    def _require_http(self) -> HTTPClient:
        if self._http is None:
            raise UnauthorizedError(API_KEY_NOT_INFORMED)
        return self._http

    def _send(self, http: HTTPClient, path: str, conflict_allowed: bool, **kwargs) -> requests.Response:
        try:
            response = http.post(path, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise self._classify(e.response, conflict_allowed) from e
        except requests.RequestException as e:
            raise UnexpectedError() from e
        return response

    @staticmethod
    def _classify(response: requests.Response | None, conflict_allowed: bool) -> CupomVerdeError:
        if response is None:
            return UnexpectedError()
        return error_from_status(
            response.status_code,
            _response_message(response),
            conflict_allowed=conflict_allowed,
        )


def _response_message(response: requests.Response) -> str | None:
    """``message`` field of a JSON error body, if there is one"""
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        return str(message) if message is not None else None
    return None
