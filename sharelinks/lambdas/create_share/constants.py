# Log events and error codes
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_DOCUMENT_ID = 'MISSING_DOCUMENT_ID'
INVALID_EXPIRES_IN_SECONDS = 'INVALID_EXPIRES_IN_SECONDS'
DOCUMENT_NOT_FOUND = 'DOCUMENT_NOT_FOUND'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
SHARE_STORE_UNAVAILABLE = 'SHARE_STORE_UNAVAILABLE'
SHARE_CREATED = 'SHARE_CREATED'
