"""HTTP transport for InnerTube requests"""

import logging
from typing import Any, Dict, Optional

import requests

from .errors import TransportError
from .retry import retry_with_backoff

logger = logging.getLogger(__name__)


class HTTPClient:
    DEFAULT_BASE_URL = "https://www.youtube.com"
    DEFAULT_CLIENT_VERSION = "2.20250219.01.00"
    USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        client_name: str = "WEB",
        client_version: str = DEFAULT_CLIENT_VERSION,
        hl: str = "en",
        gl: str = "US",
        timeout: float = 30,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.client_name = client_name
        self.client_version = client_version
        self.hl = hl
        self.gl = gl
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config) -> 'HTTPClient':
        return cls(
            base_url=config.get('api.base_url', cls.DEFAULT_BASE_URL),
            api_key=config.get('api.key') or None,
            client_version=config.get('api.client_version', cls.DEFAULT_CLIENT_VERSION),
            hl=config.get('api.hl', 'en'),
            gl=config.get('api.gl', 'US'),
            timeout=config.get_float('api.timeout', 30.0),
            max_retries=config.get_int('api.max_retries', 3),
        )

    def _context(self) -> Dict[str, Any]:
        return {
            "client": {
                "clientName": self.client_name,
                "clientVersion": self.client_version,
                "hl": self.hl,
                "gl": self.gl,
            }
        }

    def post(self, path: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST an InnerTube request and return the decoded JSON body

        Args:
            path: Endpoint path, e.g. ``/youtubei/v1/browse``
            data: Request fields; fields set to None are not sent

        Raises:
            TransportError: network failure after retries, non-2xx status or non-JSON body
        """
        url = f"{self.base_url}{path}"
        body = {"context": self._context()}
        body.update({key: value for key, value in data.items() if value is not None})

        params = {"prettyPrint": "false"}
        if self.api_key:
            params["key"] = self.api_key

        send = retry_with_backoff(
            max_retries=self.max_retries,
            initial_delay=self.retry_delay,
            exceptions=(requests.ConnectionError, requests.Timeout),
        )(self._send)

        try:
            response = send(url, body, params)
        except requests.RequestException as exc:
            raise TransportError(f"Request to {path} failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.error(f"POST {path} failed. Response: {response.text[:500]}")
            raise TransportError(
                f"Request to {path} failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"Response from {path} is not valid JSON") from exc

    def _send(self, url: str, body: Dict[str, Any], params: Dict[str, str]) -> requests.Response:
        logger.debug(f"POST {url}")
        return self.session.post(
            url,
            json=body,
            params=params,
            headers={
                'Content-Type': 'application/json',
                'User-Agent': self.USER_AGENT,
            },
            timeout=self.timeout,
        )
