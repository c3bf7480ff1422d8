"""Gateway: remote URL fetcher — implements the ResourceFetcher port via httpx."""

from __future__ import annotations

import logging

import html2text
import httpx

from ai_stdio.l1_entities.errors import FetchError, FetchErrorKind
from ai_stdio.l1_entities.resource import Resource, URLRequest

log = logging.getLogger('aistdio.fetch')

FETCH_TIMEOUT = 30.0
USER_AGENT = 'Mozilla/5.0'


def html_to_text(html: str) -> str:
    """Reduce an HTML page to readable plain text."""
    converter = html2text.HTML2Text()
    converter.body_width = 0
    converter.ignore_images = True
    return converter.handle(html)


class URLFetcher:
    """GETs a URL with a bounded timeout and converts the body to text."""

    def __init__(self, timeout: float = FETCH_TIMEOUT) -> None:
        self._timeout = timeout

    def fetch(self, request: URLRequest, project_directory: str) -> list[Resource]:
        url = request.url
        try:
            resp = httpx.get(
                url,
                headers={'User-Agent': USER_AGENT},
                timeout=self._timeout,
                follow_redirects=True,
            )
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchError(FetchErrorKind.TIMEOUT, url, f'no response within {self._timeout:g}s') from e
        except httpx.HTTPStatusError as e:
            raise FetchError(FetchErrorKind.BAD_STATUS, url, f'status {e.response.status_code}') from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(FetchErrorKind.IO_ERROR, url, str(e)) from e

        content = html_to_text(resp.text)
        log.debug('Fetched %s (%d bytes -> %d chars)', url, len(resp.content), len(content))
        return [Resource(kind='url', name=url, content=content)]
