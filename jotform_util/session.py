"""

session.py

"""

import json
from typing import Any, Callable, Dict, Optional

from requests import Request, Response, Session

from jotform_util.consts import API_VERSION, BASE_URL
from jotform_util.error import JotformInvalidResponseException, exception_for_status
from jotform_util.logger import JotformLogger
from jotform_util.result import ApiResult


def _build_get(url: str, query: dict, parameters: Any) -> Request:
    return Request("GET", url, params=query)


def _build_post(url: str, query: dict, parameters: Any) -> Request:
    return Request("POST", url, params=query, data=parameters)


def _build_put(url: str, query: dict, parameters: Any) -> Request:
    if parameters is not None and not isinstance(parameters, (str, bytes)):
        parameters = json.dumps(parameters)
    return Request(
        "PUT",
        url,
        params=query,
        data=parameters,
        headers={"Content-Type": "application/json"},
    )


def _build_delete(url: str, query: dict, parameters: Any) -> Request:
    return Request("DELETE", url, params=query)


# GET and DELETE never carry a body
REQUEST_BUILDERS: Dict[str, Callable[[str, dict, Any], Request]] = {
    "GET": _build_get,
    "POST": _build_post,
    "PUT": _build_put,
    "DELETE": _build_delete,
}


class JotformSession:
    """JotForm API HTTP request executor"""

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        api_version: str = API_VERSION,
        timeout: Optional[float] = None,
    ):
        """Create a JotForm session object

        Args:
            api_key (str): JotForm API key
            base_url (str, optional): API server. Defaults to https://api.jotform.com
            api_version (str, optional): API version. Defaults to v1
            timeout (float, optional): Request timeout in seconds. Defaults to None.
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version
        self._timeout = timeout
        self.logger: JotformLogger = JotformLogger()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.url_base}>"

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_version(self) -> str:
        return self._api_version

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    @property
    def url_base(self) -> str:
        return f"{self._base_url}/{self._api_version}"

    def url(self, endpoint: str) -> str:
        """Full URL of an endpoint, without the API key"""
        return f"{self.url_base}/{endpoint}"

    def execute(
        self,
        endpoint: str,
        parameters: Any = None,
        verb: str = "GET",
    ) -> ApiResult:
        """Performs a single request against the JotForm API

        Args:
            endpoint (str): Path relative to the API version, eg. `form/123/questions`
            parameters (Any, optional): Form fields for POST, raw JSON body for PUT.
                Ignored for GET and DELETE. Defaults to None.
            verb (str, optional): GET, POST, PUT or DELETE. Defaults to "GET".

        Raises:
            ValueError: Unknown verb
            JotformInvalidResponseException: Response body is not JSON

        Returns:
            ApiResult: envelope content on success, error on failure
        """
        verb = verb.upper()
        try:
            build = REQUEST_BUILDERS[verb]
        except KeyError as ex:
            raise ValueError(f"Unsupported HTTP verb '{verb}'") from ex

        url = self.url(endpoint)
        request = build(url, {"apiKey": self._api_key}, parameters)
        self.logger.debug(f"JotForm API {verb} {url}")
        with Session() as session:
            prepared = session.prepare_request(request)
            # proxies and CA bundle from the environment, as Session.request does
            settings = session.merge_environment_settings(prepared.url, {}, None, None, None)
            with session.send(prepared, timeout=self._timeout, **settings) as resp:
                return self.handle_response(resp)

    def handle_response(self, response: Response) -> ApiResult:
        """Unwraps the response envelope"""
        try:
            body = response.json()
        except ValueError as ex:
            raise JotformInvalidResponseException(
                f"JotForm API {response.status_code} | invalid JSON: {response.text[:200]}"
            ) from ex

        if 200 <= response.status_code < 300:
            content = body.get("content") if isinstance(body, dict) else None
            return ApiResult(response.status_code, content, None, body)

        self.logger.error(f"JotForm API {response.status_code} | {body}")
        error = exception_for_status(response.status_code)(
            f"{response.status_code} | {body}", response=response
        )
        return ApiResult(response.status_code, None, error, body)
