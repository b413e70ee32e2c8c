"""Public async-networking API: endpoints, request builder and HTTP client."""

from .builder import HttpRequestBuilder, RequestDescriptor
from .client import HttpClient, reason_phrase
from .codec import BodyDecoder, BodyEncoder, JsonCodec
from .endpoint import HttpEndpoint, HttpMethod, QueryValue, query_value_to_string
from .errors import (
    ClientError,
    DecodingError,
    HttpClientError,
    InvalidResponseError,
    NetworkError,
    UrlConstructionError,
)
from .transport import HttpResponseMeta, HttpxTransport, Transport

__all__ = [
    "BodyDecoder",
    "BodyEncoder",
    "ClientError",
    "DecodingError",
    "HttpClient",
    "HttpClientError",
    "HttpEndpoint",
    "HttpMethod",
    "HttpRequestBuilder",
    "HttpResponseMeta",
    "HttpxTransport",
    "InvalidResponseError",
    "JsonCodec",
    "NetworkError",
    "QueryValue",
    "RequestDescriptor",
    "Transport",
    "UrlConstructionError",
    "query_value_to_string",
    "reason_phrase",
]
