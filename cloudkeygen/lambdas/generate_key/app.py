import json
import logging
import functools

from cloudkeygen.constants import GeneratorStrategy
from cloudkeygen.types import LambdaEvent, LambdaContext, LambdaResponse
from cloudkeygen.dao.redis import CounterRedisDAO
from cloudkeygen.dao.exceptions import DataStoreError
from cloudkeygen.exceptions import (
    ConfigurationError,
    CounterUnavailableError,
    GeneratorError,
    KeyGenError,
    KeySpaceExhaustedError,
    RandomSourceError,
)
from cloudkeygen.generators import KeyGenerator, new_key_generator
from cloudkeygen.utils import app_prefix, guarantee_500_response, load_generator_settings, redis_settings
from cloudkeygen.lambdas.generate_key.constants import (
    COUNTER_RETRY_AFTER,
    COUNTER_UNAVAILABLE,
    GENERATOR_UNAVAILABLE,
    KEY_GENERATED,
    KEY_SPACE_EXHAUSTED,
    PING,
    RANDOM_SOURCE_FAILURE,
)


logger = logging.getLogger(__name__)

LAMBDA_NAME = 'generate_key'


def response_200(body: dict) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body),
    }


def response_500(*, error: KeyGenError | None = None) -> LambdaResponse:
    body = {'message': 'Internal Server Error'}
    if error is not None:
        body['message'] = f'Internal Server Error ({error})'
        body['errorCode'] = error.error_code
        body['retryable'] = getattr(error, 'retryable', False)
    return {
        'statusCode': 500,
        'body': json.dumps(body),
    }


def response_503(*, retry_after: int, error: GeneratorError) -> LambdaResponse:
    return {
        'statusCode': 503,
        'headers': {
            'Content-Type': 'application/json',
            'Retry-After': str(retry_after),
        },
        'body': json.dumps(
            {
                'message': f'Service Unavailable ({error})',
                'errorCode': error.error_code,
                'retryable': True,
            }
        ),
    }


@functools.cache
def get_generator() -> KeyGenerator:
    """Build the process-wide key generator once per container (cold start).

    A failed build is not cached, so the next invocation tries again.
    """
    settings = load_generator_settings()
    counter = None
    if settings.strategy != GeneratorStrategy.RANDOM:
        counter = CounterRedisDAO(**redis_settings(LAMBDA_NAME), prefix=app_prefix())
    return new_key_generator(settings, counter=counter)


def is_ping(event: LambdaEvent) -> bool:
    path = event.get('path') or event.get('resource') or ''
    return path.rstrip('/').endswith('/ping')


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests for new short URL keys

    This Lambda handler follows this procedure:
    - Step 0: Answer health pings without touching the generator
    - Step 1: Get (or build, on cold start) the configured key generator
    - Step 2: Generate a key
    - Step 3: Respond with the key

    HTTP responses:
        200: Successful key generation
            key: newly generated key
        200: Ping
            response: pong
        500: Internal server error (not retryable)
            message: indicate the cause (bad configuration, exhausted key space, entropy failure)
            errorCode: error code of the failure
        503: Shared counter unavailable (retryable)
            headers: Retry-After
            errorCode: generator:counter_unavailable

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> response = lambda_handler({'path': '/keys'}, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['key']
        'Xk3p9QaZ'
    """
    # 0- Answer health pings
    if is_ping(event):
        logger.debug('Ping received. Responding with pong.', extra={'event': PING})
        return response_200({'response': 'pong'})

    # 1- Get the configured key generator
    try:
        generator = get_generator()
    except DataStoreError as e:
        error = CounterUnavailableError(str(e))
        logger.exception(
            'Shared counter unreachable while building key generator. Responding with 503.',
            extra={'event': COUNTER_UNAVAILABLE, 'reason': str(e)},
        )
        return response_503(retry_after=COUNTER_RETRY_AFTER, error=error)
    except ConfigurationError as e:
        logger.exception(
            'Failed to build key generator. Responding with 500.',
            extra={'event': GENERATOR_UNAVAILABLE, 'reason': str(e), 'error': e.__class__.__name__},
        )
        return response_500(error=e)

    # 2- Generate a key
    try:
        key = generator.generate()
    except CounterUnavailableError as e:
        logger.warning(
            'Shared counter unavailable. Responding with 503.',
            extra={'event': COUNTER_UNAVAILABLE, 'reason': str(e)},
        )
        return response_503(retry_after=COUNTER_RETRY_AFTER, error=e)
    except KeySpaceExhaustedError as e:
        logger.error(
            'Key space exhausted. Reconfiguration required. Responding with 500.',
            extra={'event': KEY_SPACE_EXHAUSTED, 'reason': str(e)},
        )
        return response_500(error=e)
    except RandomSourceError as e:
        logger.critical(
            'Entropy source failure. Responding with 500.',
            extra={'event': RANDOM_SOURCE_FAILURE, 'reason': str(e)},
        )
        return response_500(error=e)

    # 3- Respond with the key
    logger.info('Generated key. Responding with 200.', extra={'event': KEY_GENERATED})
    return response_200({'key': key})
