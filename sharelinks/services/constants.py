# Log event codes emitted by ShareService
SHARE_CREATED = 'SHARE_CREATED'
SHARE_TOKEN_COLLISION = 'SHARE_TOKEN_COLLISION'
SHARE_RESOLVED = 'SHARE_RESOLVED'
SHARE_REVOKED = 'SHARE_REVOKED'
SHARE_NOT_FOUND = 'SHARE_NOT_FOUND'
SHARE_EXPIRED = 'SHARE_EXPIRED'
DOCUMENT_NOT_FOUND = 'DOCUMENT_NOT_FOUND'
ORPHANED_SHARE = 'ORPHANED_SHARE'
SHARES_PURGED = 'SHARES_PURGED'
SHARE_STORE_UNAVAILABLE = 'SHARE_STORE_UNAVAILABLE'

# Attempts at persisting a freshly minted token before giving up
MAX_TOKEN_ATTEMPTS = 2
