"""Resource path constants for the z/OSMF REST files service."""


class ZosFilesConstants:
    """Fixed path segments used to address z/OSMF file resources."""

    RESOURCE = "/zosmf/restfiles"
    RES_DS_FILES = "/ds"
