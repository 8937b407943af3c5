"""z/OSMF data set operations.

Public Interface:
    - Rename: Namespace with data_set and data_set_member
    - rename_data_set: Rename a data set
    - rename_data_set_member: Rename a member of a partitioned data set
    - ZosFilesResponse: Result of an operation
    - ZosmfSession: Connection details
    - ZosmfRestClient: REST transport
    - ZosFilesConstants / ZosFilesMessages: Paths and message text
    - MissingIdentifierError / RestClientError: Errors raised by operations
"""

from .constants import ZosFilesConstants
from .errors import MissingIdentifierError
from .errors import RestClientError
from .errors import ZosFilesError
from .messages import ZosFilesMessages
from .methods.rename import Rename
from .methods.rename import rename_data_set
from .methods.rename import rename_data_set_member
from .models.responses import ZosFilesResponse
from .rest.client import ZosmfRestClient
from .rest.session import ZosmfSession

__all__ = [
    "MissingIdentifierError",
    "Rename",
    "RestClientError",
    "ZosFilesConstants",
    "ZosFilesError",
    "ZosFilesMessages",
    "ZosFilesResponse",
    "ZosmfRestClient",
    "ZosmfSession",
    "rename_data_set",
    "rename_data_set_member",
]
