"""
HTTP transport speaking the WebDAV remoting protocol of the repository server.

Only the calls the repository core needs are implemented here: workspace login,
the repository descriptors report and plain binary downloads.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from urllib.parse import quote

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from lantana import __version__
from lantana.exceptions import LoginError, NoSuchWorkspaceError, RepositoryError
from lantana.models.config import HttpTransportConfig
from lantana.models.credentials import Credentials, SimpleCredentials
from lantana.models.descriptors import DescriptorValue
from lantana.transport.base import Transport
from lantana.utils.logger import get_logger

logger = get_logger(__name__)

NS_DAV = "DAV:"
NS_DCR = "http://www.day.com/jcr/webdav/1.0"

PROPFIND_WORKSPACE = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    f'<D:propfind xmlns:D="{NS_DAV}" xmlns:dcr="{NS_DCR}">'
    "<D:prop><dcr:workspaceName/></D:prop>"
    "</D:propfind>"
)
REPORT_DESCRIPTORS = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    f'<dcr:repositorydescriptors xmlns:dcr="{NS_DCR}"/>'
)


def parse_descriptors_report(body: str | bytes) -> dict[str, DescriptorValue]:
    """
    Parse a repository descriptors report.

    A descriptor with exactly one value maps to a string, anything else to a
    list of strings, in document order.

    Args:
        body: Raw XML response body

    Returns:
        Mapping of descriptor key to value

    Raises:
        RepositoryError: If the body is not a descriptors report
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise RepositoryError(f"invalid descriptors report: {e}") from e

    if root.tag != f"{{{NS_DCR}}}repositorydescriptors-report":
        raise RepositoryError(f"unexpected descriptors report root element {root.tag}")

    descriptors: dict[str, DescriptorValue] = {}
    for descriptor in root.iter(f"{{{NS_DCR}}}descriptor"):
        key = descriptor.findtext(f"{{{NS_DCR}}}descriptorkey")
        if not key:
            continue
        values = [
            value.text or ""
            for value in descriptor.findall(f"{{{NS_DCR}}}descriptorvalue")
        ]
        descriptors[key] = values[0] if len(values) == 1 else values

    return descriptors


class HttpTransport(Transport):
    """
    Non-transactional transport over HTTP.

    Example:
        >>> config = HttpTransportConfig(server_url="http://localhost:8080/server")
        >>> with HttpTransport(config) as transport:
        ...     repository = Repository(transport=transport)
        ...     session = repository.login(SimpleCredentials(user_id="admin", password="admin"))
    """

    def __init__(
        self,
        config: HttpTransportConfig | None = None,
        client: httpx.Client | None = None,
    ):
        """
        Initialize the transport.

        Args:
            config: Transport settings (defaults apply when omitted)
            client: Preconfigured httpx client, mainly for tests
        """
        self.config = config or HttpTransportConfig()
        self._client = client or httpx.Client(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )
        self._auth: httpx.BasicAuth | None = None
        self.workspace_name: str | None = None

    def _workspace_url(self, workspace_name: str, path: str = "") -> str:
        return (
            f"{self.config.server_url}/{quote(workspace_name, safe='')}"
            f"/jcr:root{quote(path, safe='/:')}"
        )

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send a request, retrying connection level failures only."""
        headers = {"User-Agent": f"{self.config.user_agent}/{__version__}"}
        headers.update(kwargs.pop("headers", {}))

        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self.config.max_retries + 1),
                wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    return self._client.request(
                        method, url, headers=headers, auth=self._auth, **kwargs
                    )
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise RepositoryError(f"{method} {url} failed: {e}") from e

    def login(self, credentials: Credentials | None, workspace_name: str) -> bool:
        if isinstance(credentials, SimpleCredentials):
            self._auth = httpx.BasicAuth(credentials.user_id, credentials.get_password())
        else:
            self._auth = None

        url = self._workspace_url(workspace_name)
        response = self._request(
            "PROPFIND",
            url,
            content=PROPFIND_WORKSPACE,
            headers={"Depth": "0", "Content-Type": "text/xml; charset=utf-8"},
        )

        if response.status_code in (401, 403):
            raise LoginError(
                f"access to workspace '{workspace_name}' denied",
                details={"status_code": response.status_code},
            )
        if response.status_code == 404:
            raise NoSuchWorkspaceError(
                f"workspace '{workspace_name}' does not exist",
                workspace_name=workspace_name,
            )
        if response.status_code >= 400:
            raise RepositoryError(
                f"login to '{workspace_name}' failed with HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )

        self.workspace_name = workspace_name
        return True

    def get_repository_descriptors(self) -> dict[str, DescriptorValue]:
        url = f"{self.config.server_url}/"
        response = self._request(
            "REPORT",
            url,
            content=REPORT_DESCRIPTORS,
            headers={"Depth": "0", "Content-Type": "text/xml; charset=utf-8"},
        )
        if response.status_code >= 400:
            raise RepositoryError(
                f"descriptors report failed with HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )
        return parse_descriptors_report(response.content)

    def get_binary_stream(self, workspace_name: str, path: str) -> bytes:
        response = self._request("GET", self._workspace_url(workspace_name, path))
        if response.status_code == 404:
            raise RepositoryError(f"no binary property at {path}")
        if response.status_code >= 400:
            raise RepositoryError(
                f"fetching {path} failed with HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )
        return response.content

    def logout(self) -> None:
        self._auth = None
        self.workspace_name = None

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
