# Share tokens: random bytes drawn per token (18 bytes -> 24 base64url characters)
DEFAULT_TOKEN_BYTES = 18
MIN_TOKEN_BYTES = 16  # 128 bits

# Share URLs: <base url>/s/<token>
SHARE_PATH_PREFIX = '/s/'
DEFAULT_BASE_URL = 'http://localhost:3000'

# Title shown for documents shared without a title
UNTITLED_DOCUMENT_TITLE = 'Untitled'

# Expired share records stay readable (as "expired") for this long before Redis reclaims them
EXPIRED_SHARE_RETENTION_SECONDS = 2_592_000  # 60 * 60 * 24 * 30

# Application environment
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
AWS_SAM_LOCAL_ENV = 'AWS_SAM_LOCAL'
LOG_LEVEL_ENV = 'LOG_LEVEL'

# Public base URL used to build share links
SHARE_BASE_URL_ENV = 'SHARE_BASE_URL'
BASE_URL_ENV = 'BASE_URL'

# AppConfig
APPCONFIG_APP_ID_ENV = 'APPCONFIG_APP_ID'
APPCONFIG_ENV_ID_ENV = 'APPCONFIG_ENV_ID'
APPCONFIG_PROFILE_ID_ENV = 'APPCONFIG_PROFILE_ID'
APPCONFIG_AGENT_URL_ENV = 'APPCONFIG_AGENT_URL'
APPCONFIG_PROFILE_NAME_ENV = 'APPCONFIG_PROFILE_NAME'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
