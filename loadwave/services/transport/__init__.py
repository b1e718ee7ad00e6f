from loadwave.services.transport.http_transport import (
    HttpTransport,
    HttpTransportConfig,
    TransportResponse,
    close_http_transport,
    get_http_transport,
)

__all__ = [
    'HttpTransport',
    'HttpTransportConfig',
    'TransportResponse',
    'close_http_transport',
    'get_http_transport',
]
