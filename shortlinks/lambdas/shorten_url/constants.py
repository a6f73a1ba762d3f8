# Logging events and error codes of the shorten_url lambda
INVALID_JSON = 'INVALID_JSON'
MISSING_URL = 'MISSING_URL'
MISSING_HOST = 'MISSING_HOST'
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
