# Log events and error codes
MISSING_TOKEN = 'MISSING_TOKEN'
SHARE_NOT_FOUND = 'SHARE_NOT_FOUND'
LINK_EXPIRED = 'LINK_EXPIRED'
DOCUMENT_NOT_FOUND = 'DOCUMENT_NOT_FOUND'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
SHARE_STORE_UNAVAILABLE = 'SHARE_STORE_UNAVAILABLE'
SHARE_RESOLVED = 'SHARE_RESOLVED'
