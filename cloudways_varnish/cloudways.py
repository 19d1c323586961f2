"""
Methods to interact with the Cloudways API to run Varnish service actions.
"""

import logging
import os
from collections import namedtuple

import requests

from cloudways_varnish.exception import AuthenticationError, ConfigError, DispatchError, OperationTimeoutError
from cloudways_varnish.utils import coerce_int
from cloudways_varnish.utils.poll import INTERVAL_MILLIS, MAX_ATTEMPTS, PollManager

API_BASE = "https://api.cloudways.com/api/v1"

TOKEN_URL = "{root}/oauth/access_token".format(root=API_BASE)
VARNISH_URL = "{root}/service/varnish".format(root=API_BASE)
OPERATION_URL = "{root}/operation/{{operationId}}".format(root=API_BASE)

# Seconds to wait on each HTTP call before giving up.
REQUESTS_TIMEOUT = float(os.environ.get("REQUESTS_TIMEOUT", 10))

VALID_ACTIONS = ('enable', 'disable', 'purge')

LOG = logging.getLogger(__name__)


class Operation(namedtuple('Operation', ['id', 'is_completed', 'raw'])):
    """
    Snapshot of an asynchronous Cloudways operation.
    """
    __slots__ = ()

    @classmethod
    def from_payload(cls, payload, default_id=None):
        """
        Build an Operation from the "operation" object of an API response.
        """
        return cls(str(payload.get('id') or default_id), bool(payload.get('is_completed')), payload)


def _json_or_none(response):
    """
    Returns the decoded JSON body as a dict, or None if it isn't a JSON object.
    """
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _auth_headers(token):
    return {'Authorization': 'Bearer ' + token}


def get_access_token(email, api_key):
    """
    Get an OAuth access token from Cloudways to be used for future calls.

    Args:
        email (str): The email address of the Cloudways account
        api_key (str): The API key generated via the Cloudways platform

    Returns:
        The access token

    Raises:
        AuthenticationError: Raised if the response has no access_token, whatever its status code.
    """
    LOG.info("Obtaining OAuth access token...")
    response = requests.post(TOKEN_URL, json={'email': email, 'api_key': api_key}, timeout=REQUESTS_TIMEOUT)

    body = _json_or_none(response)
    if not body or not body.get('access_token'):
        raise AuthenticationError("Failed to obtain access token: {}".format(response.text))

    LOG.info("Access token obtained")
    return body['access_token']


def execute_varnish_action(token, server_id, action):
    """
    Starts a Varnish service action on a server.

    The action is posted as-is to the unified varnish endpoint. The server id is
    coerced with coerce_int, so input without leading digits is sent as 0.

    Args:
        token (str): token to authenticate client
        server_id (str): The id of the Cloudways server
        action (str): One of enable, disable or purge

    Returns:
        The initiated Operation.

    Raises:
        ConfigError: Raised if the action is not a valid Varnish action.
        DispatchError: Raised if the response has no operation or the operation has no id.
    """
    if action not in VALID_ACTIONS:
        raise ConfigError("Invalid ACTION '{}'. Must be one of: {}".format(action, ', '.join(VALID_ACTIONS)))

    payload = {'server_id': coerce_int(server_id), 'action': action}
    LOG.info("Executing Varnish %s on server %s...", action, server_id)
    response = requests.post(VARNISH_URL, headers=_auth_headers(token), json=payload, timeout=REQUESTS_TIMEOUT)

    body = _json_or_none(response)
    operation = body.get('operation') if body else None
    if not isinstance(operation, dict) or not operation.get('id'):
        raise DispatchError("Operation failed: {}".format(response.text))

    operation = Operation.from_payload(operation)
    LOG.info("Operation initiated (ID: %s)", operation.id)
    return operation


def check_operation_status(token, operation_id):
    """
    Fetches the current status of an operation.

    Args:
        token (str): token to authenticate client
        operation_id (str): The id of the operation to check

    Returns:
        The decoded JSON body of the status response.
    """
    response = requests.get(OPERATION_URL.format(operationId=operation_id), headers=_auth_headers(token),
                            timeout=REQUESTS_TIMEOUT)
    return response.json()


def _is_completed(status):
    """
    True if a status payload reports its operation as completed.
    """
    if not isinstance(status, dict):
        return False
    operation = status.get('operation')
    return isinstance(operation, dict) and bool(operation.get('is_completed'))


def wait_for_completion(token, operation_id, max_attempts=MAX_ATTEMPTS, interval_millis=INTERVAL_MILLIS):
    """
    Polls an operation at a fixed interval until it is completed.

    Args:
        token (str): token to authenticate client
        operation_id (str): The id of the operation to wait for
        max_attempts (int): Maximum number of status checks
        interval_millis (int): Milliseconds to wait before each status check

    Returns:
        The completed Operation.

    Raises:
        OperationTimeoutError: Raised if the operation is not completed after max_attempts checks.
    """
    LOG.info("Waiting for operation %s to complete...", operation_id)
    poller = PollManager(max_attempts, interval_millis, is_complete=_is_completed)
    status = poller.execute(check_operation_status, token, operation_id)
    if status is None:
        raise OperationTimeoutError(operation_id, max_attempts)

    LOG.info("Operation completed successfully")
    return Operation.from_payload(status['operation'], default_id=operation_id)
