from sharelinks.utils.config import app_env, app_name, app_prefix, load_config, redis_kwargs
from sharelinks.utils.helpers import (
    base_url,
    share_base_url,
    build_share_url,
    utc_now,
    isoformat_utc,
    parse_datetime,
    token_fingerprint,
    require_environment,
    guarantee_500_response,
)
from sharelinks.utils.tokens import generate_token, is_token_well_formed
from sharelinks.utils.logging import initialize_logging


__all__ = [
    'generate_token',
    'is_token_well_formed',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'redis_kwargs',
    'base_url',
    'share_base_url',
    'build_share_url',
    'utc_now',
    'isoformat_utc',
    'parse_datetime',
    'token_fingerprint',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
