# Log events and error codes
MISSING_DOCUMENT_ID = 'MISSING_DOCUMENT_ID'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
SHARE_STORE_UNAVAILABLE = 'SHARE_STORE_UNAVAILABLE'
SHARES_LISTED = 'SHARES_LISTED'
