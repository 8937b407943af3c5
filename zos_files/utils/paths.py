"""Resource path assembly for z/OSMF REST requests.

Paths are joined verbatim. Nothing is percent-encoded or normalized, so
the endpoint string sent on the wire is exactly what callers passed in.
"""


def join_resource_path(*segments: str) -> str:
    """Join path segments with a single ``/`` at each boundary.

    Args:
        segments: Path segments, e.g. resource root, service segment, target

    Returns:
        Joined path

    Examples:
        >>> join_resource_path("/zosmf/restfiles", "/ds", "USER.DATA.SET")
        '/zosmf/restfiles/ds/USER.DATA.SET'

        >>> join_resource_path("/zosmf/restfiles/", "ds", "USER.DATA.SET(MEM)")
        '/zosmf/restfiles/ds/USER.DATA.SET(MEM)'
    """
    path = ""
    for segment in segments:
        if not segment:
            continue
        if not path:
            path = segment
            continue
        path = f"{path.rstrip('/')}/{segment.lstrip('/')}"
    return path


def member_target(data_set_name: str, member_name: str) -> str:
    """Address a member inside a partitioned data set: ``DSN(MEMBER)``."""
    return f"{data_set_name}({member_name})"
