import dataclasses
import logging
from contextvars import ContextVar
from typing import Iterable, List, Optional, Tuple
from urllib.parse import quote, unquote

from fastapi import FastAPI, Request

logger = logging.getLogger("localized_api.localization")

QUERY_CULTURE = "culture"
QUERY_UI_CULTURE = "ui-culture"
CULTURE_COOKIE = ".AspNetCore.Culture"

# Accept-Language values tried, best quality first
MAX_ACCEPT_LANGUAGE_VALUES = 3


@dataclasses.dataclass(frozen=True)
class RequestCulture:
    culture: str
    ui_culture: str
    provider: str = "default"


_current_culture: ContextVar[Optional[RequestCulture]] = ContextVar("request_culture", default=None)


def current_culture() -> Optional[RequestCulture]:
    """Culture negotiated for the request being served, None outside a request."""
    return _current_culture.get()


def parse_accept_language(header: Optional[str]) -> List[Tuple[str, float]]:
    """Parse 'it-IT,it;q=0.9,en;q=0.8' into [(tag, q), ...], best first.

    Entries with q=0, the '*' wildcard and unparsable weights are dropped.
    Equal weights keep header order.
    """
    if not header:
        return []
    entries = []
    for part in header.split(","):
        pieces = [p.strip() for p in part.split(";")]
        tag = pieces[0]
        if not tag or tag == "*":
            continue
        q = 1.0
        for param in pieces[1:]:
            if param.lower().startswith("q="):
                try:
                    q = float(param[2:])
                except ValueError:
                    q = -1.0
        if not 0.0 < q <= 1.0:
            continue
        entries.append((tag, q))
    # sorted() is stable
    return sorted(entries, key=lambda e: e[1], reverse=True)


def make_cookie_value(culture: str, ui_culture: Optional[str] = None) -> str:
    """Culture cookie value, URL-encoded as it is sent on the wire: ``c=<culture>|uic=<ui-culture>``."""
    return quote(f"c={culture}|uic={ui_culture or culture}", safe="")


def parse_cookie_value(value: Optional[str]) -> Optional[Tuple[str, str]]:
    """Parse a culture cookie into (culture, ui_culture); None when malformed."""
    if not value:
        return None
    parts = [p for p in unquote(value).split("|") if p]
    if len(parts) != 2 or not parts[0].startswith("c=") or not parts[1].startswith("uic="):
        return None
    culture, ui_culture = parts[0][2:], parts[1][4:]
    if not culture and not ui_culture:
        return None
    return culture or ui_culture, ui_culture or culture


class CultureNegotiator:
    """Picks a supported culture for a request.

    Providers are tried in order: query string (``culture``/``ui-culture``),
    the culture cookie, then the ``Accept-Language`` header. The first
    provider that yields a supported culture or UI culture wins; a slot it
    cannot match gets the default culture. When no provider matches, the
    first supported culture is used for both.
    """

    def __init__(self, supported_cultures: Iterable[str], fallback_to_parent: bool = True):
        self.supported_cultures = tuple(supported_cultures)
        if not self.supported_cultures:
            raise ValueError("At least one supported culture is required")
        self.fallback_to_parent = fallback_to_parent
        self._lookup = {c.lower(): c for c in self.supported_cultures}

    @property
    def default_culture(self) -> str:
        return self.supported_cultures[0]

    def match(self, tag: Optional[str]) -> Optional[str]:
        if not tag:
            return None
        candidate = tag.strip().replace("_", "-").lower()
        while candidate:
            if candidate in self._lookup:
                return self._lookup[candidate]
            if not self.fallback_to_parent or "-" not in candidate:
                return None
            candidate = candidate.rsplit("-", 1)[0]
        return None

    def negotiate(
        self,
        query_culture: Optional[str] = None,
        query_ui_culture: Optional[str] = None,
        accept_language: Optional[str] = None,
        cookie: Optional[str] = None,
    ) -> RequestCulture:
        # a missing query key takes the other key's raw value
        if query_culture is not None or query_ui_culture is not None:
            result = self._resolve(
                query_culture if query_culture is not None else query_ui_culture,
                query_ui_culture if query_ui_culture is not None else query_culture,
                "query",
            )
            if result:
                return result

        parsed = parse_cookie_value(cookie)
        if parsed:
            result = self._resolve(parsed[0], parsed[1], "cookie")
            if result:
                return result

        for tag, _ in parse_accept_language(accept_language)[:MAX_ACCEPT_LANGUAGE_VALUES]:
            matched = self.match(tag)
            if matched:
                return RequestCulture(matched, matched, provider="accept-language")

        return RequestCulture(self.default_culture, self.default_culture)

    def _resolve(self, culture: str, ui_culture: str, provider: str) -> Optional[RequestCulture]:
        matched, matched_ui = self.match(culture), self.match(ui_culture)
        if not matched and not matched_ui:
            return None
        return RequestCulture(matched or self.default_culture, matched_ui or self.default_culture, provider)


def install_localization(app: FastAPI, negotiator: CultureNegotiator) -> None:
    """Register the HTTP middleware that negotiates the culture of every request."""

    @app.middleware("http")
    async def request_localization(request: Request, call_next):
        result = negotiator.negotiate(
            request.query_params.get(QUERY_CULTURE),
            request.query_params.get(QUERY_UI_CULTURE),
            request.headers.get("accept-language"),
            request.cookies.get(CULTURE_COOKIE),
        )
        request.state.culture = result
        token = _current_culture.set(result)
        logger.debug(
            "Request %s %s culture=%s provider=%s", request.method, request.url.path, result.culture, result.provider
        )
        try:
            response = await call_next(request)
        finally:
            _current_culture.reset(token)
        response.headers["Content-Language"] = result.ui_culture
        return response
