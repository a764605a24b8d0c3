from typing import cast

import pytest

from sharelinks.types import LambdaConfiguration, LambdaEvent


TOKEN = 'Zk3u9QwErTy0pLmN_aB-cD12'


@pytest.fixture
def config() -> LambdaConfiguration:
    return cast(LambdaConfiguration, {'redis': {'host': 'redis.test', 'port': 6379, 'db': 0}})


def apigw_event(method: str, resource: str, path: str, path_parameters: dict | None = None, body: str | None = None) -> LambdaEvent:
    return cast(
        LambdaEvent,
        {
            'resource': resource,
            'httpMethod': method,
            'path': path,
            'pathParameters': path_parameters,
            'headers': {'User-Agent': 'pytest', 'Content-Type': 'application/json'},
            'body': body,
            'isBase64Encoded': False,
            'requestContext': {
                'resourcePath': resource,
                'httpMethod': method,
                'domainName': 'testhost:1000',
                'stage': 'test',
            },
        },
    )


@pytest.fixture
def make_event():
    return apigw_event
