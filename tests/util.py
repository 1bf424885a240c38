import json
import logging
from contextlib import contextmanager
from typing import Any, List
from urllib.parse import parse_qs, parse_qsl, urlsplit
from requests import PreparedRequest, Response, Session
from jotform_util import JotformClient, JotformLogger

API_KEY = "test-api-key"


def make_response(status_code: int = 200, body: Any = None, text: str = None) -> Response:
    """Builds a closed requests.Response without touching the network"""
    resp = Response()
    resp.status_code = status_code
    if text is None:
        text = json.dumps(body)
    resp._content = text.encode("utf-8")
    resp._content_consumed = True
    resp.encoding = "utf-8"
    return resp


class FakeTransport:
    """Replacement for requests.Session.send, records every prepared request"""

    def __init__(self, status_code: int = 200, body: Any = None, text: str = None):
        self.status_code = status_code
        self.body = {"responseCode": 200, "content": None} if body is None else body
        self.text = text
        self.requests: List[PreparedRequest] = []
        self.kwargs: List[dict] = []

    def __call__(self, request: PreparedRequest, **kwargs) -> Response:
        self.requests.append(request)
        self.kwargs.append(kwargs)
        return make_response(self.status_code, self.body, self.text)

    @property
    def last(self) -> PreparedRequest:
        return self.requests[-1]


def install_transport(monkeypatch, transport: FakeTransport) -> FakeTransport:
    monkeypatch.setattr(Session, "send", transport)
    return transport


def make_client(monkeypatch, status_code: int = 200, body: Any = None, **kwargs):
    transport = install_transport(monkeypatch, FakeTransport(status_code, body))
    return JotformClient(API_KEY, **kwargs), transport


def request_path(request: PreparedRequest) -> str:
    return urlsplit(request.url).path


def request_query(request: PreparedRequest) -> dict:
    return {k: v[0] for k, v in parse_qs(urlsplit(request.url).query).items()}


def form_body(request: PreparedRequest) -> dict:
    return dict(parse_qsl(request.body, keep_blank_values=True))


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


@contextmanager
def capture_logs():
    logger = JotformLogger()
    handler = ListHandler()
    logger.addHandler(handler)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)
