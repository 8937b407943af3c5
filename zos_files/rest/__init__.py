"""REST transport for z/OSMF.

Public Interface:
    - ZosmfRestClient: Async REST client
    - ZosmfSession: Connection details
    - Headers: Well-known header entries
    - build_json_headers: Header list for a JSON body
    - serialize_payload: Deterministic JSON serialization
"""

from .client import ZosmfRestClient
from .headers import Headers
from .headers import build_json_headers
from .headers import serialize_payload
from .session import ZosmfSession

__all__ = [
    "Headers",
    "ZosmfRestClient",
    "ZosmfSession",
    "build_json_headers",
    "serialize_payload",
]
