# -*- coding: utf-8 -*-
# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3

"""
Test Utilities for Cupom Verde

Fake HTTP responses and a helper to stub the API behind a client, so host
applications can test their integration without network access.
"""

import json
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import MagicMock, patch

import requests

TEST_API_KEY = "56c1f1b8-9b5c-41cd-b8f7-872be3500ad3"
VALID_CPF = "52998224725"
VALID_CPF_FORMATTED = "529.982.247-25"


@dataclass
class MockResponse:
    """Mock HTTP response"""
    status_code: int = 200
    content: bytes | str = b""
    text: str = field(init=False, default="")

    def __post_init__(self):
        if isinstance(self.content, str):
            self.content = self.content.encode("utf-8")
        self.text = bytes(self.content).decode("utf-8")

    @classmethod
    def with_json(cls, body: Any, status_code: int = 200) -> "MockResponse":
        return cls(status_code=status_code, content=json.dumps(body))

    def json(self) -> Any:
        return json.loads(self.content)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)


@contextmanager
def mock_api(client, response=None, error: Exception | None = None):
    """
    Stub the HTTP session of an initialised client.

    Usage:
        with mock_api(cpv, MockResponse.with_json({"chave": "1"})) as request:
            cpv.enviar_cupom_fiscal(xml, cpf)
            method, url = request.call_args.args

    Args:
        client: CupomVerdeClient on which init() was called
        response: Response returned by every request
        error: Exception raised by every request instead

    Yields:
        MagicMock: The patched ``Session.request``
    """
    request = MagicMock(return_value=response, side_effect=error)
    with patch.object(client._http._session, "request", request):
        yield request
