"""Canonical logging field names shared by networking log lines."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Request/response fields, rendered together under ``REQUEST``.
REQUEST = "request"
HTTP_METHOD = "http_method"
URL = "url"
STATUS_CODE = "status_code"
REQUEST_FIELDS = (HTTP_METHOD, URL, STATUS_CODE)

# Diagnostic fields attached to individual DEBUG records.
QUERY_PARAMETER = "query_parameter"
RESPONSE_TYPE = "response_type"
ERROR_KIND = "error_kind"

# Process-level fields fixed when logging is configured.
SERVICE = "service"
ENVIRONMENT = "environment"
