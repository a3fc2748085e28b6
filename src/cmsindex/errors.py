"""Exception definitions for cmsindex"""


class CmsIndexException(Exception):
    """Base exception for all cmsindex errors.

    Lookups that simply find nothing (unknown collection, unresolvable key
    path, empty query) never raise; they return ``None`` or an empty list.
    Use this as a catch-all for the conditions that do raise.
    """

    pass


class ConfigException(CmsIndexException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (missing required fields, invalid values)
    - A collection or field definition is malformed
    """

    pass


class EntryLoadException(CmsIndexException):
    """Raised when an entry snapshot cannot be read or validated."""

    pass


class SchemaContractError(CmsIndexException):
    """Raised when a caller asks for a field list the collection cannot provide.

    This is a programmer error, not a "not found" result:
    - A file name was passed for a collection that has no ``files``
    - No file name was passed for a file collection
    - The file name is not declared by the file collection
    """

    pass
