"""Scribes for PHOTO, LOGO, SOUND and KEY."""

from __future__ import annotations

from ..data_type import VCardDataType
from ..exceptions import CannotParseError
from ..helper import byte_decoder, byte_encoder
from ..parameters import Encoding, Parameters
from ..version import VCardVersion
from .base import PropertyScribe

V2_1, V3_0, V4_0 = VCardVersion


def data_uri(content_type, data) -> str:
    encoded = byte_encoder(data).decode("ascii").replace("\n", "")
    return f"data:{content_type};base64,{encoded}"


def parse_data_uri(uri):
    """
    Return (content type, bytes) of a base64 "data:" URI, or None for other URIs.
    """
    if not uri.lower().startswith("data:") or "," not in uri:
        return None
    head, payload = uri[5:].split(",", 1)
    media = head.split(";")
    if "base64" not in (m.lower() for m in media[1:]):
        return None
    return media[0] or None, decode_base64(payload)


def decode_base64(value):
    try:
        return byte_decoder("".join(value.split()), "base64")
    except ValueError as e:
        raise CannotParseError(f"Invalid base64 data: {e}") from e


class BinaryScribe(PropertyScribe):
    """
    Inline data is base64 encoded, with ENCODING=BASE64 (2.1), ENCODING=b
    (3.0) or as a "data:" URI (4.0).

    @ivar media_prefix:
        Prefix that turns a 2.1/3.0 TYPE such as "JPEG" into a media type.
    """

    def __init__(self, property_class, media_prefix):
        self.property_class = property_class
        self.name = property_class.name
        self.media_prefix = media_prefix

    def default_data_type(self, version):
        return {V2_1: None, V3_0: VCardDataType.BINARY, V4_0: VCardDataType.URI}[version]

    def data_type(self, prop, version):
        if prop.url is not None:
            return VCardDataType.URL if version is V2_1 else VCardDataType.URI
        return self.default_data_type(version)

    def media_type(self, content_type):
        if content_type is None or "/" in content_type:
            return content_type
        return self.media_prefix + content_type.lower()

    @staticmethod
    def type_name(content_type):
        """
        "image/jpeg" -> "JPEG", a value that isn't a media type is kept.
        """
        if "/" not in content_type:
            return content_type
        return content_type.split("/")[-1].upper()

    def _parse_text(self, value, data_type, parameters, context):
        encoding = (parameters.encoding or "").lower()
        if encoding in ("b", "base64"):
            parameters.replace(Parameters.ENCODING, None)
            content_type = parameters.first(Parameters.TYPE)
            if content_type is not None:
                parameters.remove(Parameters.TYPE, content_type)
            return self.property_class(data=decode_base64(value), content_type=content_type)

        inline = parse_data_uri(value)
        if inline is not None:
            content_type, data = inline
            return self.property_class(data=data, content_type=content_type)

        if context.version is V4_0:
            content_type = parameters.mediatype
            parameters.replace(Parameters.MEDIATYPE, None)
        else:
            content_type = parameters.first(Parameters.TYPE)
            if content_type is not None:
                parameters.remove(Parameters.TYPE, content_type)
        return self.property_class(url=value, content_type=content_type)

    def _write_text(self, prop, context):
        if prop.url is not None:
            return prop.url
        if prop.data is None:
            return ""
        if context.version is V4_0:
            return data_uri(self.media_type(prop.content_type) or "application/octet-stream", prop.data)
        return byte_encoder(prop.data).decode("ascii").replace("\n", "")

    def _prepare_parameters(self, prop, parameters, version, vcard):
        if prop.data is not None and prop.url is None and version is not V4_0:
            parameters.replace(Parameters.ENCODING, Encoding.BASE64 if version is V2_1 else Encoding.B)
        if prop.content_type is None:
            return
        if version is V4_0:
            if prop.url is not None:
                parameters.replace(Parameters.MEDIATYPE, self.media_type(prop.content_type))
        else:
            parameters.add_type(self.type_name(prop.content_type))
