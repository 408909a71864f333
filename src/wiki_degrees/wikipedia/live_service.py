import logging
import httpx
from typing import List, Optional

from wiki_degrees.capabilities.link_lookup import ILinkLookup
from wiki_degrees.config import SolverConfig, DEFAULT_USER_AGENT
from wiki_degrees.exceptions import PageNotFoundException, WikiServiceUnavailableException
from wiki_degrees.utils.wiki_helpers import filter_content_links


class LiveWikiService(ILinkLookup):
    """
    Link lookup against the live Wikipedia action API.
    All methods are asynchronous.
    """
    def __init__(
            self,
            language: str = "en",
            timeout: float = 10.0,
            user_agent: str = DEFAULT_USER_AGENT,
            transport: Optional[httpx.AsyncBaseTransport] = None,
        ):
        self.language = language
        self.base_url = f"https://{language}.wikipedia.org/w/api.php"
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent, "Accept-Encoding": "gzip"}
        self._transport = transport
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: SolverConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> "LiveWikiService":
        return cls(
            language=config.language,
            timeout=config.request_timeout,
            user_agent=config.user_agent,
            transport=transport,
        )

    async def get_outgoing_links(self, page_title: str, limit: Optional[int] = None) -> List[str]:
        """
        Fetch the main-namespace links of a page, following plcontinue pagination.

        The API lists links alphabetically by title, not in page order. When
        ``limit`` is given, paging stops as soon as ``limit`` distinct content
        links have arrived, so a capped caller sees the alphabetically first
        links of the page.

        Raises:
            PageNotFoundException: If the page does not exist.
            WikiServiceUnavailableException: On transport errors, HTTP errors,
                API errors or a response that cannot be parsed.
        """
        all_links: List[str] = []
        plcontinue = None

        async with httpx.AsyncClient(
            timeout=self.timeout, headers=self.headers, transport=self._transport
        ) as client:
            while True:
                params = {
                    "action": "query", "format": "json", "prop": "links",
                    "titles": page_title, "plnamespace": "0", "pllimit": "max",
                    "redirects": "1", "formatversion": "2"
                }
                if plcontinue:
                    params["plcontinue"] = plcontinue

                try:
                    response = await client.get(self.base_url, params=params)
                    response.raise_for_status()
                    data = response.json()
                except httpx.HTTPError as e:
                    self.logger.debug(f"Request for links of '{page_title}' failed: {e}")
                    raise WikiServiceUnavailableException(f"Wikipedia API request failed for '{page_title}': {e}")
                except ValueError as e:
                    raise WikiServiceUnavailableException(f"Malformed API response for '{page_title}': {e}")

                if not isinstance(data, dict):
                    raise WikiServiceUnavailableException(f"Unexpected API response format for '{page_title}'")
                if "error" in data:
                    info = data["error"].get("info", "unknown error")
                    raise WikiServiceUnavailableException(f"Wikipedia API error: {info}")

                pages = data.get("query", {}).get("pages", [])
                if not pages:
                    raise PageNotFoundException(f"Page not found: {page_title}")
                page = pages[0]
                if "missing" in page or "invalid" in page:
                    raise PageNotFoundException(f"Page does not exist: {page_title}")

                all_links.extend(link["title"] for link in page.get("links", []))
                if limit is not None and len(filter_content_links(all_links, limit=limit)) >= limit:
                    break

                continue_data = data.get("continue", {})
                if "plcontinue" in continue_data:
                    plcontinue = continue_data["plcontinue"]
                else:
                    break

        self.logger.debug(f"Fetched {len(all_links)} links for '{page_title}'")
        return all_links
