from shortlinks.exceptions import ShortLinksError


class DAOError(ShortLinksError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class UrlMappingNotFoundError(DAOError):
    """Raised when a UrlMapping is not found in the data store."""

    error_code = 'dao:url_mapping_not_found_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, throttling, and missing tables.
    """

    error_code = 'dao:data_store_error'
