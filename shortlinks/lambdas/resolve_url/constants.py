# Logging events and error codes of the resolve_url lambda
MISSING_SHORT_ID = 'MISSING_SHORT_ID'
SHORT_ID_NOT_FOUND = 'SHORT_ID_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
