import logging
from typing import Optional

import httpx

from .errors import NetworkError

MARKETCAP_URL = "https://api.tdax.com/api/marketcap/"

logger = logging.getLogger(__name__)


def fetch_marketcap(
    url: str = MARKETCAP_URL,
    timeout: float = 10.0,
    client: Optional[httpx.Client] = None,
) -> bytes:
    # connect errors, timeouts and non-2xx all end up as NetworkError
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=timeout)
    try:
        r = client.get(url, timeout=timeout)
        r.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        raise NetworkError(f"{url} answered HTTP {status}", url, status) from exc
    except httpx.HTTPError as exc:
        raise NetworkError(f"Unable to reach {url}: {exc}", url) from exc
    finally:
        if owns_client:
            client.close()
    logger.debug("GET %s -> %d (%d bytes)", url, r.status_code, len(r.content))
    return r.content
