"""
Resolves the inputs of a Varnish action run from the environment.

Every input can be given either by its plain name (``CLOUDWAYS_EMAIL``) or by
the ``INPUT_`` alias GitHub Actions uses for action inputs (``INPUT_CLOUDWAYS_EMAIL``).
"""

from collections import namedtuple

from cloudways_varnish.cloudways import VALID_ACTIONS
from cloudways_varnish.exception import ConfigError
from cloudways_varnish.utils import envvar_get_bool, from_env
from cloudways_varnish.utils.poll import INTERVAL_MILLIS, MAX_ATTEMPTS

# Required inputs, in the order they are reported when missing.
REQUIRED_INPUTS = (
    ('email', 'CLOUDWAYS_EMAIL'),
    ('api_key', 'CLOUDWAYS_API_KEY'),
    ('server_id', 'CLOUDWAYS_SERVER_ID'),
)

VarnishConfig = namedtuple(
    'VarnishConfig',
    ['email', 'api_key', 'server_id', 'action', 'wait_for_completion', 'max_attempts', 'interval_millis']
)


def get_inputs(**overrides):
    """
    Build a VarnishConfig from the environment.

    Keyword overrides that are not None (e.g. values given as command-line
    options) take precedence over the environment.
    """
    config = VarnishConfig(
        email=from_env('CLOUDWAYS_EMAIL'),
        api_key=from_env('CLOUDWAYS_API_KEY'),
        server_id=from_env('CLOUDWAYS_SERVER_ID'),
        action=from_env('ACTION', 'enable'),
        wait_for_completion=envvar_get_bool('WAIT_FOR_COMPLETION', 'true'),
        max_attempts=MAX_ATTEMPTS,
        interval_millis=INTERVAL_MILLIS,
    )
    config = config._replace(**{key: value for key, value in overrides.items() if value is not None})
    return config._replace(action=str(config.action).lower())


def assert_required(config):
    """
    Checks that the required inputs are present and the action is valid.

    Raises:
        ConfigError: listing every missing input, or naming the invalid action.
    """
    missing = [name for field, name in REQUIRED_INPUTS if not getattr(config, field)]
    if missing:
        raise ConfigError("Missing required inputs: {}".format(', '.join(missing)))

    if config.action not in VALID_ACTIONS:
        raise ConfigError(
            "Invalid ACTION '{}'. Must be one of: {}".format(config.action, ', '.join(VALID_ACTIONS))
        )
