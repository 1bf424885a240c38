import json
import pytest
from requests.exceptions import ConnectionError as requests_ConnectionError
from jotform_util.error import (
    JotformException,
    JotformInternalException,
    JotformInvalidAuthenticationException,
    JotformInvalidResponseException,
    JotformNotFoundException,
    JotformRateLimitException,
)
from jotform_util.session import JotformSession
from tests.util import (
    API_KEY,
    FakeTransport,
    capture_logs,
    form_body,
    install_transport,
    request_path,
    request_query,
)


def make_session(monkeypatch, status_code=200, body=None, text=None, **kwargs):
    transport = install_transport(monkeypatch, FakeTransport(status_code, body, text))
    return JotformSession(API_KEY, **kwargs), transport


def test_url_layout(monkeypatch):
    session, transport = make_session(monkeypatch)
    session.execute("user/usage")
    assert transport.last.url.startswith("https://api.jotform.com/v1/user/usage?")
    assert request_query(transport.last) == {"apiKey": API_KEY}


def test_custom_base_url_and_version(monkeypatch):
    session, transport = make_session(
        monkeypatch, base_url="https://eu-api.jotform.com/", api_version="v2"
    )
    session.execute("user")
    assert transport.last.url.startswith("https://eu-api.jotform.com/v2/user?")


@pytest.mark.parametrize("verb", ["GET", "POST", "PUT", "DELETE"])
def test_api_key_in_query_for_every_verb(monkeypatch, verb):
    session, transport = make_session(monkeypatch)
    session.execute("folder/1", {"name": "x"} if verb == "POST" else None, verb)
    assert transport.last.method == verb
    assert request_query(transport.last)["apiKey"] == API_KEY
    assert "Authorization" not in transport.last.headers


def test_get_never_sends_body(monkeypatch):
    session, transport = make_session(monkeypatch)
    session.execute("user/forms", {"limit": "10", "filter": "x"}, "GET")
    assert transport.last.body is None
    assert "limit" not in request_query(transport.last)


def test_delete_never_sends_body(monkeypatch):
    session, transport = make_session(monkeypatch)
    session.execute("form/1", {"ignored": "1"}, "DELETE")
    assert transport.last.body is None


def test_post_is_form_encoded(monkeypatch):
    session, transport = make_session(monkeypatch)
    session.execute("form/1/questions", {"question[text]": "Q1"}, "POST")
    assert transport.last.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert form_body(transport.last) == {"question[text]": "Q1"}


def test_put_sends_raw_json(monkeypatch):
    session, transport = make_session(monkeypatch)
    raw = '{"forms": ["1", "2"]}'
    session.execute("folder/9", raw, "PUT")
    assert transport.last.headers["Content-Type"] == "application/json"
    assert transport.last.body == raw


def test_put_serializes_mapping(monkeypatch):
    session, transport = make_session(monkeypatch)
    session.execute("folder/9", {"forms": ["1"]}, "PUT")
    assert transport.last.body == json.dumps({"forms": ["1"]})


def test_verb_is_case_insensitive(monkeypatch):
    session, transport = make_session(monkeypatch)
    session.execute("form/1", verb="delete")
    assert transport.last.method == "DELETE"


def test_unknown_verb(monkeypatch):
    session, transport = make_session(monkeypatch)
    with pytest.raises(ValueError):
        session.execute("form/1", verb="PATCH")
    assert transport.requests == []


def test_timeout_passed_to_transport(monkeypatch):
    session, transport = make_session(monkeypatch, timeout=5)
    session.execute("user")
    assert transport.kwargs[-1]["timeout"] == 5


def test_ca_bundle_from_environment(monkeypatch, tmp_path):
    bundle = tmp_path / "corp-ca.pem"
    bundle.write_text("")
    monkeypatch.setenv("REQUESTS_CA_BUNDLE", str(bundle))
    session, transport = make_session(monkeypatch)
    session.execute("user")
    assert transport.kwargs[-1]["verify"] == str(bundle)


def test_verify_defaults_to_true(monkeypatch):
    monkeypatch.delenv("REQUESTS_CA_BUNDLE", raising=False)
    monkeypatch.delenv("CURL_CA_BUNDLE", raising=False)
    session, transport = make_session(monkeypatch)
    session.execute("user")
    assert transport.kwargs[-1]["verify"] is True


def test_success_unwraps_content(monkeypatch):
    body = {"responseCode": 200, "message": "success", "content": [1, 2, 3]}
    session, _ = make_session(monkeypatch, 200, body)
    result = session.execute("user/forms")
    assert result.ok
    assert result.content == [1, 2, 3]
    assert result.body == body
    assert result.unwrap() == [1, 2, 3]


def test_success_scalar_content(monkeypatch):
    session, _ = make_session(monkeypatch, 200, {"content": "OK"})
    assert session.execute("user/logout").content == "OK"


def test_success_without_content(monkeypatch):
    session, _ = make_session(monkeypatch, 200, {"message": "success"})
    result = session.execute("user")
    assert result.ok
    assert result.content is None


def test_failure_returns_error_without_raising(monkeypatch):
    session, _ = make_session(monkeypatch, 401, {"message": "bad key"})
    with capture_logs() as records:
        result = session.execute("user")
    assert not result.ok
    assert result.content is None
    assert result.body == {"message": "bad key"}
    assert isinstance(result.error, JotformInvalidAuthenticationException)
    errors = [r for r in records if r.levelname == "ERROR"]
    assert len(errors) == 1
    assert "bad key" in errors[0].getMessage()
    with pytest.raises(JotformInvalidAuthenticationException):
        result.unwrap()


@pytest.mark.parametrize(
    "status_code, exception",
    [
        (404, JotformNotFoundException),
        (429, JotformRateLimitException),
        (500, JotformInternalException),
        (503, JotformInternalException),
        (418, JotformException),
    ],
)
def test_failure_status_mapping(monkeypatch, status_code, exception):
    session, _ = make_session(monkeypatch, status_code, {"message": "nope"})
    result = session.execute("form/1")
    assert type(result.error) is exception
    assert result.error.response.status_code == status_code


def test_invalid_json_on_error_raises(monkeypatch):
    session, _ = make_session(monkeypatch, 502, text="<html>Bad Gateway</html>")
    with pytest.raises(JotformInvalidResponseException):
        session.execute("user")


def test_invalid_json_on_success_raises(monkeypatch):
    session, _ = make_session(monkeypatch, 200, text="not json")
    with pytest.raises(JotformInvalidResponseException):
        session.execute("user")


def test_transport_errors_propagate(monkeypatch):
    def refuse(self, request, **kwargs):
        raise requests_ConnectionError("refused")

    install_transport(monkeypatch, refuse)
    session = JotformSession(API_KEY)
    with pytest.raises(requests_ConnectionError):
        session.execute("user")


def test_api_key_not_logged(monkeypatch):
    session, _ = make_session(monkeypatch, 401, {"message": "bad key"})
    with capture_logs() as records:
        session.execute("user")
    assert records
    assert all(API_KEY not in r.getMessage() for r in records)


def test_request_path(monkeypatch):
    session, transport = make_session(monkeypatch)
    session.execute("system/plan/FREE")
    assert request_path(transport.last) == "/v1/system/plan/FREE"
