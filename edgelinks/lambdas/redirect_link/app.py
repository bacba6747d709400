import logging

from botocore.exceptions import ClientError

from edgelinks.dao.redis import ShortLinkRedisDAO
from edgelinks.dao.exceptions import DataStoreError
from edgelinks.exceptions import ConfigurationError, LinkNotFoundError
from edgelinks.registry import LinkRegistry
from edgelinks.types import LambdaContext, LambdaEvent, LambdaResponse
from edgelinks.utils import load_config, get_short_url, app_prefix, base_url
from edgelinks.utils.helpers import guarantee_500_response
from edgelinks.lambdas.responses import response_302, response_404, response_500, response_503
from edgelinks.lambdas.redirect_link.constants import REDIRECT_SUCCESS, CONFIGURATION_ERROR


logger = logging.getLogger(__name__)


def extract_identifier(event: LambdaEvent) -> str:
    """Return the identifier from the `identifier` path parameter or the raw path."""
    identifier = (event.get('pathParameters') or {}).get('identifier')
    if identifier is None:
        identifier = (event.get('path') or '').removeprefix('/')
    return identifier


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect short links

    This Lambda handler follows this procedure to redirect short links:
    - Step 1: Extract identifier from request path
    - Step 2: Resolve the identifier via the link registry
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
                Cache-Control: public, max-age=86400
        404: Not found
            message: identifier empty, reserved or never allocated
        500: Internal server error
        503: Service unavailable
            message: data store unreachable

    Args:
        event (LambdaEvent):
            API Gateway event payload containing the identifier path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'identifier': 'my-link'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/a/b'
    """
    # 0- Get application's config
    try:
        app_config = load_config('redirect_link')
    except (ConfigurationError, ClientError):
        logger.exception(
            'Failed to load AppConfig for redirect link function. Responding with 500.',
            extra={'event': CONFIGURATION_ERROR},
        )
        return response_500()
    else:
        logger.debug('Assuming Redis as the backend database for short links')
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}

    # 1- Extract identifier from request's path
    identifier = extract_identifier(event)
    logger.debug('Client requested short link %s.', get_short_url(identifier, event))

    # 2- Resolve the identifier via the link registry
    try:
        short_link_dao = ShortLinkRedisDAO(**redis_config, prefix=app_prefix())
        registry = LinkRegistry(short_link_dao, base_url=base_url(event))
        target_url = registry.resolve(identifier)
    except LinkNotFoundError as e:
        logger.info(
            'Short link not found. Responding with 404.',
            extra={'identifier': identifier, 'event': e.error_code},
        )
        return response_404(message=f"short link {get_short_url(identifier, event)} doesn't exist", error_code=e.error_code)
    except DataStoreError as e:
        logger.exception('Could not resolve short link. Responding with 503.', extra={'identifier': identifier, 'event': e.error_code})
        return response_503(message=str(e), error_code=e.error_code)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'identifier': identifier, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=target_url)
