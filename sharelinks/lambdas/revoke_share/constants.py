# Log events and error codes
MISSING_TOKEN = 'MISSING_TOKEN'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
SHARE_STORE_UNAVAILABLE = 'SHARE_STORE_UNAVAILABLE'
SHARE_REVOKED = 'SHARE_REVOKED'

REVOKED_MESSAGE = 'Share link revoked'
