"""Rename data sets and data set members through z/OSMF.

Each call validates its names, builds the endpoint keyed by the new name
and a payload referencing the current name, then issues exactly one PUT.
Transport failures are logged and re-raised unchanged.

Contract:
- Input: ZosmfSession, current and new names
- Output: ZosFilesResponse on success
- Side Effects: One z/OSMF rename request per call

Example:
    >>> from zos_files.methods.rename import rename_data_set
    >>> from zos_files.rest import ZosmfSession
    >>>
    >>> session = ZosmfSession(hostname="mainframe.example.com", user="ibmuser", password="secret")
    >>> response = await rename_data_set(session, "USER.BEFORE.SET", "USER.AFTER.SET")
    >>> print(response.command_response)
"""

import logging

from zos_files.constants import ZosFilesConstants
from zos_files.messages import ZosFilesMessages
from zos_files.models.rename import RenameKind
from zos_files.models.rename import RenameRequest
from zos_files.models.responses import ZosFilesResponse
from zos_files.rest.client import ZosmfRestClient
from zos_files.rest.headers import build_json_headers
from zos_files.rest.headers import serialize_payload
from zos_files.rest.session import ZosmfSession
from zos_files.utils.paths import join_resource_path
from zos_files.utils.validation import require_name

logger = logging.getLogger(__name__)


async def rename_data_set(
    session: ZosmfSession,
    before_data_set_name: str,
    after_data_set_name: str,
    rest_client: ZosmfRestClient | None = None,
) -> ZosFilesResponse:
    """Rename a data set.

    Args:
        session: z/OSMF connection info
        before_data_set_name: Current name of the data set
        after_data_set_name: New name of the data set
        rest_client: REST client to send the request with (default: new ZosmfRestClient)

    Returns:
        Successful ZosFilesResponse

    Raises:
        MissingIdentifierError: If either name is None or empty
        RestClientError: If the z/OSMF request fails
    """
    message = ZosFilesMessages.missing_dataset_name.message
    require_name(before_data_set_name, message)
    require_name(after_data_set_name, message)

    request = RenameRequest(
        kind=RenameKind.DATA_SET,
        before_name=before_data_set_name,
        after_name=after_data_set_name,
    )
    return await _send_rename(session, request, rest_client)


async def rename_data_set_member(
    session: ZosmfSession,
    data_set_name: str,
    before_member_name: str,
    after_member_name: str,
    rest_client: ZosmfRestClient | None = None,
) -> ZosFilesResponse:
    """Rename a member of a partitioned data set.

    Args:
        session: z/OSMF connection info
        data_set_name: Name of the data set the member lies in
        before_member_name: Current name of the member
        after_member_name: New name of the member
        rest_client: REST client to send the request with (default: new ZosmfRestClient)

    Returns:
        Successful ZosFilesResponse

    Raises:
        MissingIdentifierError: If any name is None or empty
        RestClientError: If the z/OSMF request fails
    """
    message = ZosFilesMessages.missing_dataset_name.message
    require_name(data_set_name, message)
    require_name(before_member_name, message)
    require_name(after_member_name, message)

    request = RenameRequest(
        kind=RenameKind.MEMBER,
        before_name=before_member_name,
        after_name=after_member_name,
        container_name=data_set_name,
    )
    return await _send_rename(session, request, rest_client)


async def _send_rename(
    session: ZosmfSession,
    request: RenameRequest,
    rest_client: ZosmfRestClient | None,
) -> ZosFilesResponse:
    endpoint = join_resource_path(
        ZosFilesConstants.RESOURCE,
        ZosFilesConstants.RES_DS_FILES,
        request.target_name,
    )
    logger.debug(f"Endpoint: {endpoint}")

    payload = request.to_payload()
    headers = build_json_headers(serialize_payload(payload))

    client = rest_client or ZosmfRestClient()
    try:
        # Response body is not used; completing without error is success
        await client.put_expect_string(session, endpoint, headers, payload)
    except Exception as e:
        logger.error(e)
        raise

    return ZosFilesResponse(
        success=True,
        command_response=ZosFilesMessages.data_set_renamed_successfully.message,
    )


class Rename:
    """Namespace for rename operations."""

    data_set = staticmethod(rename_data_set)
    data_set_member = staticmethod(rename_data_set_member)
