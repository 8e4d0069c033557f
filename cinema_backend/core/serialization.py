"""Group-filtered serialization and JSON/XML content negotiation.

A group name ("movie", "sceance", ...) selects the pydantic response model whose
fields are emitted. :func:`api_response` renders the result as XML when the
client's most preferred Accept entry is ``application/xml`` and as JSON in
every other case.
"""
import re
from typing import Any, Dict, List, Optional, Sequence, Type
from xml.etree import ElementTree

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from cinema_backend.schemas.category import CategoryResponse
from cinema_backend.schemas.cinema import CinemaResponse
from cinema_backend.schemas.movie import MovieResponse
from cinema_backend.schemas.reservation import ReservationResponse
from cinema_backend.schemas.room import RoomResponse
from cinema_backend.schemas.sceance import SceanceResponse


XML_MIME = "application/xml"
JSON_MIME = "application/json"
XML_ROOT = "result"
XML_ITEM = "entry"

# code points XML 1.0 cannot carry, escaped or not
XML_ILLEGAL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

GROUPS: Dict[str, Type[BaseModel]] = {
    "movie": MovieResponse,
    "category": CategoryResponse,
    "cinema": CinemaResponse,
    "room": RoomResponse,
    "sceance": SceanceResponse,
    "reservation": ReservationResponse,
}


def serialize(group: str, data: Any) -> Any:
    """Dump an entity, or a sequence of them, keeping only the group's fields."""
    model = GROUPS[group]
    if isinstance(data, (list, tuple)):
        return [model.model_validate(item).model_dump(mode="json") for item in data]
    return model.model_validate(data).model_dump(mode="json")


def acceptable_content_types(accept: Optional[str]) -> List[str]:
    """Media ranges of an Accept header, most preferred first."""
    if not accept:
        return []
    ranked = []
    for position, part in enumerate(accept.split(",")):
        media_type, *params = [piece.strip() for piece in part.split(";")]
        if not media_type:
            continue
        quality = 1.0
        for param in params:
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        # stable on ties: earlier entries win
        ranked.append((-quality, position, media_type.lower()))
    return [media_type for _, _, media_type in sorted(ranked)]


def negotiate(accept: Optional[str]) -> str:
    content_types = acceptable_content_types(accept)
    if content_types and content_types[0] == XML_MIME:
        return XML_MIME
    return JSON_MIME


def _fill(element: ElementTree.Element, value: Any) -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            _fill(ElementTree.SubElement(element, str(key)), item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _fill(ElementTree.SubElement(element, XML_ITEM), item)
    elif isinstance(value, bool):
        element.text = "true" if value else "false"
    elif value is not None:
        element.text = XML_ILLEGAL.sub("\ufffd", str(value))


def to_xml(data: Any) -> bytes:
    root = ElementTree.Element(XML_ROOT)
    _fill(root, data)
    return ElementTree.tostring(root, encoding="utf-8", xml_declaration=True)


def api_response(request: Request, data: Any, status_code: int = 200) -> Response:
    """Return ``data`` as XML or JSON depending on what the request accepts."""
    if negotiate(request.headers.get("accept")) == XML_MIME:
        return Response(content=to_xml(data), status_code=status_code, media_type=XML_MIME)
    return JSONResponse(content=data, status_code=status_code)


def entity_response(request: Request, group: str, entity: Any, status_code: int = 200,
                    message: Optional[str] = None) -> Response:
    body: Dict[str, Any] = {group: serialize(group, entity)}
    if message is not None:
        body["message"] = message
    return api_response(request, body, status_code)


def list_response(request: Request, group: str, entities: Sequence[Any]) -> Response:
    return api_response(request, serialize(group, list(entities)))
