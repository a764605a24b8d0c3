import json
import logging

from sharelinks.types import LambdaEvent, LambdaContext, LambdaDiagnosticResponse
from sharelinks.services import ShareService
from sharelinks.dao.redis import ShareRecordRedisDAO, DocumentRedisDAO
from sharelinks.dao.exceptions import DataStoreError
from sharelinks.exceptions import ConfigurationError, InternalError
from sharelinks.utils import load_config, redis_kwargs, app_prefix, share_base_url
from sharelinks.lambdas.purge_expired_shares.constants import SUCCESS, ERROR


logger = logging.getLogger(__name__)


def response_success(*, purged: int) -> LambdaDiagnosticResponse:
    return json.dumps(
        {
            'status': SUCCESS,
            'purged': purged,
            'message': f'Successfully purged {purged} expired share links',
        }
    )


def response_error(*, error: Exception) -> LambdaDiagnosticResponse:
    return json.dumps(
        {
            'status': ERROR,
            'message': 'Failed to purge expired share links',
            'reason': str(error),
            'error': error.__class__.__name__,
        }
    )


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaDiagnosticResponse:
    """Delete expired share records on a schedule (EventBridge).

    Expired links already answer 410 on their own; purging only reclaims
    storage and keeps per-document listings short.

    Diagnostic responses (NOT valid HTTP responses):
        `success`:
            status: success
            purged: <number of deleted records>
            message: Successfully purged <n> expired share links
        `error`:
            status: error
            message: Failed to purge expired share links
            reason: <reason>
            error: <error class name> (e.g. InternalError, BadConfigurationError)
    """
    try:
        config = redis_kwargs(load_config('purge_expired_shares'))
        service = ShareService(
            share_dao=ShareRecordRedisDAO(**config, prefix=app_prefix()),
            document_dao=DocumentRedisDAO(**config, prefix=app_prefix()),
            base_url=share_base_url(event),
        )
        purged = service.purge_expired()
    except (KeyError, ConfigurationError, InternalError, DataStoreError) as error:
        logger.exception(
            'Failed to purge expired share links.',
            extra={'event': ERROR, 'reason': str(error), 'error': error.__class__.__name__},
        )
        return response_error(error=error)
    else:
        logger.info(
            'Successfully purged %s expired share links.',
            purged,
            extra={'event': SUCCESS, 'purged': purged},
        )
        return response_success(purged=purged)
