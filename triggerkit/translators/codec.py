"""
Header, query string, body and media type helpers shared by the request
and response translators.

Every header source (single-value map, multi-value map, strings, lists)
is folded into ``httpx.Headers`` here, and everything downstream works on
that one ordered, case-insensitive multimap.
"""

import base64
import binascii
import re
from collections.abc import Iterable, Mapping
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from triggerkit.exceptions import DecodeError, ParseError

PLACEHOLDER_HOST = "localhost"

# Substrings of a media type that mark a body as text
TEXT_MEDIA_MARKERS: tuple[str, ...] = ("json", "xml")
FUNCTION_URL_TEXT_MEDIA_MARKERS: tuple[str, ...] = ("json", "xml", "javascript", "css")

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_MEDIA_TYPE_RE = re.compile(rf"^({_TOKEN})/({_TOKEN})$")
# One "; name=value" parameter, value a token or a quoted string
_MEDIA_PARAM_RE = re.compile(rf'\s*;\s*({_TOKEN})\s*=\s*({_TOKEN}|"(?:[^"\\]|\\.)*")')


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return value if it is a mapping, otherwise an empty one."""
    return value if isinstance(value, Mapping) else {}


def header_values(value: Any) -> list[str]:
    """
    Normalize a header value to a list of strings.

    Values arrive as a single string or as a list of strings depending on
    the event shape. Anything else (None, numbers, nested objects) is
    dropped.
    """
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, str)]
    return []


def merge_headers(single: Any = None, multi: Any = None) -> httpx.Headers:
    """
    Build a header multimap from the ``headers`` and ``multiValueHeaders`` maps.

    Values are added, never replaced. API Gateway mirrors every header of a
    REST request into both maps, so a multi-value entry that repeats a value
    the single-value map already supplied for the same key is counted once.

    Args:
        single: ``headers`` map (values are strings or lists of strings)
        multi: ``multiValueHeaders`` map (values are lists of strings)

    Returns:
        Headers in arrival order, original key casing preserved
    """
    items: list[tuple[str, str]] = []
    seen: dict[str, list[str]] = {}

    for key, value in as_mapping(single).items():
        for item in header_values(value):
            items.append((key, item))
            seen.setdefault(key.lower(), []).append(item)

    for key, value in as_mapping(multi).items():
        pending = list(seen.get(key.lower(), ()))
        for item in header_values(value):
            if item in pending:
                pending.remove(item)
                continue
            items.append((key, item))

    # Gateway header values are not guaranteed to be ASCII
    return httpx.Headers(items, encoding="utf-8")


def _string_pairs(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        pairs.extend((key, item) for item in header_values(value))
    # Sorted by key like Go's url.Values.Encode; stable within a key
    return sorted(pairs, key=lambda pair: pair[0])


def build_query_string(
    raw_query: Any = None,
    single: Any = None,
    multi: Any = None,
) -> str:
    """
    Resolve the query string of a request.

    The first non-empty source wins and the others are ignored entirely:
    ``rawQueryString`` verbatim, then ``queryStringParameters``, then
    ``multiValueQueryStringParameters``. Multi-value parameters are
    therefore lost whenever a non-empty single-value map is present.

    Args:
        raw_query: ``rawQueryString`` (v2 and Function URL)
        single: ``queryStringParameters``
        multi: ``multiValueQueryStringParameters``

    Returns:
        Encoded query string without the leading ``?``
    """
    if isinstance(raw_query, str) and raw_query:
        return raw_query

    for params in (single, multi):
        params = as_mapping(params)
        if params:
            pairs = _string_pairs(params)
            if pairs:
                return urlencode(pairs)

    return ""


def build_url(domain_name: Any = None, path: Any = None, query: str = "") -> httpx.URL:
    """
    Assemble the synthetic request URL.

    The host is ``requestContext.domainName`` when present, otherwise a
    placeholder; the URL is never dialled.

    Raises:
        ParseError: If the assembled URL is rejected by the URL parser
    """
    host = domain_name if isinstance(domain_name, str) and domain_name else PLACEHOLDER_HOST
    url = f"http://{host}"

    if isinstance(path, str) and path:
        if not path.startswith("/"):
            url += "/"
        url += path

    if query:
        url += f"?{query}"

    try:
        return httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise ParseError(f"Invalid request URL {url!r}: {exc}", url=url) from exc


def decode_body(body: Any, is_base64_encoded: Any = False) -> bytes:
    """
    Turn an event ``body`` into raw bytes.

    A missing or non-string body yields an empty body.

    Raises:
        DecodeError: If the body is flagged base64 but does not decode
    """
    if not isinstance(body, str):
        return b""

    if is_base64_encoded is True:
        try:
            # Line breaks from wrapped encoders are skipped, anything else is strict
            return base64.b64decode(body.replace("\r", "").replace("\n", ""), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DecodeError(
                f"Invalid base64-encoded body: {exc}",
                details={"body_length": len(body)},
            ) from exc

    return body.encode("utf-8")


def parse_media_type(content_type: Optional[str]) -> str:
    """
    Extract the lowercased media type from a Content-Type value.

    Parameters are validated but discarded. A single trailing ``;`` is
    tolerated.

    Raises:
        ValueError: If the value holds no valid ``type/subtype`` or a
            parameter is malformed or repeated
    """
    if not content_type:
        raise ValueError("no media type")

    media_type, _, _ = content_type.partition(";")
    params = content_type[len(media_type):]
    media_type = media_type.strip().lower()
    if not _MEDIA_TYPE_RE.match(media_type):
        raise ValueError(f"invalid media type: {content_type!r}")

    _check_media_params(params)
    return media_type


def _check_media_params(params: str) -> None:
    seen: set[str] = set()
    pos = 0
    while params[pos:].strip():
        match = _MEDIA_PARAM_RE.match(params, pos)
        if match is None:
            if params[pos:].strip() == ";":
                return
            raise ValueError(f"invalid media parameter: {params[pos:]!r}")
        name = match.group(1).lower()
        if name in seen:
            raise ValueError(f"duplicate media parameter: {name!r}")
        seen.add(name)
        pos = match.end()


def is_text_media_type(
    content_type: Optional[str],
    markers: tuple[str, ...] = TEXT_MEDIA_MARKERS,
) -> bool:
    """
    Decide whether a body with this Content-Type is sent as text.

    Text means ``text/*`` or a media type containing one of the markers.
    An unparseable Content-Type counts as binary.
    """
    try:
        media_type = parse_media_type(content_type)
    except ValueError:
        return False
    return media_type.startswith("text/") or any(marker in media_type for marker in markers)


def encode_body(
    body: bytes,
    content_type: Optional[str],
    markers: tuple[str, ...] = TEXT_MEDIA_MARKERS,
) -> tuple[str, bool]:
    """
    Encode a response body for a trigger response.

    Returns:
        Tuple of (body string, is_base64_encoded)
    """
    if is_text_media_type(content_type, markers):
        try:
            return body.decode("utf-8"), False
        except UnicodeDecodeError:
            # Not valid UTF-8 despite the media type; keep it lossless
            pass
    return base64.b64encode(body).decode("ascii"), True


def fold_headers(headers: httpx.Headers) -> list[tuple[str, list[str]]]:
    """
    Group header values by case-insensitive key.

    Keys keep the casing they were first seen with; groups and values keep
    arrival order.
    """
    groups: dict[str, tuple[str, list[str]]] = {}
    for raw_key, raw_value in headers.raw:
        key = raw_key.decode(headers.encoding)
        value = raw_value.decode(headers.encoding)
        groups.setdefault(key.lower(), (key, []))[1].append(value)
    return list(groups.values())


def first_header(groups: Iterable[tuple[str, list[str]]], name: str) -> Optional[str]:
    """Return the first value of a header from folded groups, if present."""
    name = name.lower()
    for key, values in groups:
        if key.lower() == name and values:
            return values[0]
    return None
