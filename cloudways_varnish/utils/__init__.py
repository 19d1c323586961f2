"""
Initialization code for the utils module.
"""

import os
import re

# Prefix GitHub Actions puts in front of action inputs.
INPUT_PREFIX = 'INPUT_'

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def from_env(key, fallback=''):
    """
    Look up an environment variable, falling back to its INPUT_-prefixed alias.

    The plain key wins whenever it is present, even if empty. A missing or
    empty value returns the fallback.
    """
    if key in os.environ:
        value = os.environ[key]
    else:
        value = os.environ.get(INPUT_PREFIX + key)
    if value is None or value == '':
        return fallback
    return value


def envvar_get_bool(var_name, default):
    """
    Grab an environment variable and return True only if it reads "true".
    """
    return from_env(var_name, default).strip().lower() == 'true'


def coerce_int(value):
    """
    Parse the leading integer of a string, e.g. "123abc" -> 123.

    Values without a leading integer coerce to 0.
    """
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))
