import json
import logging

from botocore.exceptions import ClientError

from edgelinks.dao.redis import ShortLinkRedisDAO
from edgelinks.dao.exceptions import DataStoreError
from edgelinks.exceptions import (
    AllocationExhaustedError,
    ConfigurationError,
    IdentifierTakenError,
    ValidationError,
)
from edgelinks.registry import LinkRegistry
from edgelinks.types import LambdaContext, LambdaEvent, LambdaResponse
from edgelinks.utils import load_config, app_prefix, base_url
from edgelinks.utils.helpers import guarantee_500_response
from edgelinks.lambdas.responses import (
    json_response,
    response_400,
    response_409,
    response_500,
    response_503,
)
from edgelinks.lambdas.create_link.constants import LINK_CREATED, INVALID_JSON_BODY, CONFIGURATION_ERROR


logger = logging.getLogger(__name__)


def parse_request(event: LambdaEvent) -> tuple[str | None, str | None]:
    """Extract (target URL, custom identifier) from the request

    A JSON body `{"url": ..., "id": ...}` takes precedence. Without a body
    the query string parameters `url` and `id` are used, e.g.
    `GET /create?url=https://example.com&id=my-link`.

    Raises:
        json.JSONDecodeError: if the body is not valid JSON.
        ValueError: if the JSON body is not an object.
    """
    body = event.get('body')
    if body:
        payload = json.loads(body)
        if not isinstance(payload, dict):
            raise ValueError('JSON body must be an object')
    else:
        payload = event.get('queryStringParameters') or {}

    # Non-string JSON values are validated in their string form
    target_url, custom_id = payload.get('url'), payload.get('id')
    return (
        target_url if target_url is None else str(target_url),
        custom_id if custom_id is None else str(custom_id),
    )


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to create short links

    This Lambda handler follows this procedure to create short links:
    - Step 1: Extract target URL and optional custom identifier from the request
    - Step 2: Allocate an identifier via the link registry
    - Step 3: Respond to user with 200 success

    HTTP responses:
        200: Successful allocation
            success: true
            shortId: allocated identifier
            shortLink: fully qualified short link
            type: 'custom' or 'random'
        400: Bad client request
            message: invalid JSON body, invalid URL or invalid identifier
        409: Conflict
            message: custom identifier already taken
        500: Internal server error
        503: Service unavailable
            message: data store unreachable or no free identifier found

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        LambdaResponse:
            JSON-serializable response following API Gateway Lambda Proxy
            output format. Includes status code, headers, and response body.

    Example:
        >>> event = {'body': '{"url": "https://example.com/a/b", "id": "my-link"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['shortLink']
        'http://localhost:3000/my-link'
    """
    # 0- Get application's config
    try:
        app_config = load_config('create_link')
    except (ConfigurationError, ClientError):
        logger.exception(
            'Failed to load AppConfig for create link function. Responding with 500.',
            extra={'event': CONFIGURATION_ERROR},
        )
        return response_500()
    else:
        logger.debug('Assuming Redis as the backend database for short links')
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}

    # 1- Extract target URL and custom identifier from the request
    try:
        target_url, custom_id = parse_request(event)
    except ValueError:  # json.JSONDecodeError is a ValueError
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)

    # 2- Allocate an identifier via the link registry
    try:
        short_link_dao = ShortLinkRedisDAO(**redis_config, prefix=app_prefix())
        registry = LinkRegistry(short_link_dao, base_url=base_url(event))
        result = registry.allocate(target_url, custom_id)
    except ValidationError as e:
        logger.info('Rejected invalid input. Responding with 400.', extra={'event': e.error_code})
        return response_400(message=str(e), error_code=e.error_code)
    except IdentifierTakenError as e:
        logger.info('Custom identifier already taken. Responding with 409.', extra={'event': e.error_code})
        return response_409(message=str(e), error_code=e.error_code)
    except (AllocationExhaustedError, DataStoreError) as e:
        logger.exception('Could not allocate a short link. Responding with 503.', extra={'event': e.error_code})
        return response_503(message=str(e), error_code=e.error_code)

    # 3- Return successful response to user
    logger.info(
        'Short link created. Responding with 200.',
        extra={'identifier': result.identifier, 'kind': str(result.kind), 'event': LINK_CREATED},
    )
    return json_response(
        200,
        {
            'success': True,
            'message': f'Successfully shortened {target_url} to {result.short_link}',
            'shortId': result.identifier,
            'shortLink': result.short_link,
            'type': str(result.kind),
        },
    )
