"""Public cloud info service client wrapper"""

import json
import logging
from typing import Optional

import httpx

from seidl.exceptions import CloudInfoConnectionError, CloudInfoDecodeError
from seidl.models.provider import Provider

logger = logging.getLogger("seidl")

IMAGES_PATH = "/v1/{provider}/images.json"
REGIONS_PATH = "/v1/amazon/regions.json"


class CloudInfoClient:
    """Wrapper around an httpx client for the public cloud info API"""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client

        Args:
            base_url: Service root, e.g. 'https://susepubliccloudinfo.suse.com'
            timeout: Request timeout in seconds (None disables the timeout)
            user_agent: Optional User-Agent header
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport
        self._http_client = None

    @property
    def http_client(self) -> httpx.Client:
        """Get the httpx client, creating if necessary"""
        if self._http_client is None:
            headers = {"Accept": "application/json"}
            if self.user_agent:
                headers["User-Agent"] = self.user_agent
            self._http_client = httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers=headers,
                transport=self._transport,
            )
        return self._http_client

    def close(self) -> None:
        """Close the underlying HTTP client"""
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> "CloudInfoClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch(self, path: str) -> bytes:
        """
        Issue a GET request and return the raw response body

        Raises:
            CloudInfoConnectionError: On transport errors or non-2xx status
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url}")
        try:
            response = self.http_client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.debug(f"GET {url} returned {e.response.status_code}")
            raise CloudInfoConnectionError(
                f"{url} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.debug(f"GET {url} failed: {e}")
            raise CloudInfoConnectionError(f"{url}: {e}") from e
        logger.debug(f"GET {url} returned {len(response.content)} bytes")
        return response.content

    def get_json(self, path: str) -> object:
        """
        Fetch a path and decode its JSON body

        Raises:
            CloudInfoConnectionError: If the request fails
            CloudInfoDecodeError: If the body is not valid JSON
        """
        body = self.fetch(path)
        try:
            return json.loads(body)
        except ValueError as e:
            raise CloudInfoDecodeError(f"invalid JSON from {path}: {e}") from e

    def get_images_payload(self, provider: Provider) -> object:
        """Fetch the images.json payload of a provider"""
        return self.get_json(IMAGES_PATH.format(provider=provider.value))

    def get_regions_payload(self) -> object:
        """Fetch the AWS regions.json payload"""
        return self.get_json(REGIONS_PATH)
