"""Unit tests for runtime utilities in runtime.py."""

import pytest

from sharelinks.utils.runtime import running_locally


@pytest.mark.parametrize(
    'app_env, sam_flag, expected',
    [
        ('local', None, True),
        ('LOCAL', None, True),
        ('dev', None, False),
        ('prod', None, False),
        ('dev', 'true', True),
        ('dev', 'false', False),
    ],
)
def test_running_locally(monkeypatch, app_env, sam_flag, expected):
    monkeypatch.setenv('APP_ENV', app_env)

    if sam_flag is None:
        monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)
    else:
        monkeypatch.setenv('AWS_SAM_LOCAL', sam_flag)

    assert running_locally() is expected
