#! /usr/bin/env python3

"""
Command-line script to enable, disable or purge Varnish on a Cloudways server.

Credentials and the server come from the environment (CLOUDWAYS_EMAIL,
CLOUDWAYS_API_KEY, CLOUDWAYS_SERVER_ID), optionally with the INPUT_ prefix used
for GitHub Actions inputs. ACTION and WAIT_FOR_COMPLETION are read the same way
unless given as options.
"""

import logging
from functools import partial

import click
import click_log
from click.core import ParameterSource

from cloudways_varnish import cloudways
from cloudways_varnish.config import assert_required, get_inputs
from cloudways_varnish.scripts.helpers import _fail, _log, _write_output_file
from cloudways_varnish.utils.poll import INTERVAL_MILLIS, MAX_ATTEMPTS

PACKAGE_LOG = click_log.basic_config(logging.getLogger('cloudways_varnish'))
LOG = logging.getLogger(__name__)

SCRIPT_SHORTNAME = 'Varnish'
ECHO = partial(_log, SCRIPT_SHORTNAME)
FAIL = partial(_fail, SCRIPT_SHORTNAME)


def _summary(config, operation, completed):
    return {
        'action': config.action,
        'server_id': config.server_id,
        'operation_id': operation.id,
        'completed': completed,
    }


@click.command("varnish_action")
@click.option(
    '--action',
    help="Varnish action to run: enable, disable or purge. Defaults to the ACTION input, then 'enable'.",
)
@click.option(
    '--server-id',
    help="Cloudways server id. Defaults to the CLOUDWAYS_SERVER_ID input.",
)
@click.option(
    '--wait/--no-wait',
    default=None,
    help="Wait for the operation to complete, or return as soon as it is started. "
         "Defaults to the WAIT_FOR_COMPLETION input, then waiting.",
)
@click.option(
    '--max-attempts',
    type=click.IntRange(min=1),
    default=MAX_ATTEMPTS,
    envvar='MAX_ATTEMPTS',
    show_default=True,
    help="Number of times to check the operation status before giving up.",
)
@click.option(
    '--interval-ms',
    type=click.IntRange(min=0),
    default=INTERVAL_MILLIS,
    envvar='POLL_INTERVAL_MS',
    show_default=True,
    help="Milliseconds to wait before each status check.",
)
@click.option(
    '--output-file',
    help="File in which to write the script's YAML output.",
)
@click_log.simple_verbosity_option(PACKAGE_LOG, default='INFO')
def varnish_action(action, server_id, wait, max_attempts, interval_ms, output_file):
    """
    Run a Varnish service action on a Cloudways server and optionally wait for it to finish.
    """
    if click.get_current_context().get_parameter_source('wait') == ParameterSource.DEFAULT:
        wait = None

    config = None
    operation = None
    error = None
    try:
        config = get_inputs(
            action=action,
            server_id=server_id,
            wait_for_completion=wait,
            max_attempts=max_attempts,
            interval_millis=interval_ms,
        )
        assert_required(config)

        LOG.info("Action: %s", config.action)
        LOG.info("Server ID: %s", config.server_id)
        LOG.info("Wait for completion: %s", config.wait_for_completion)

        token = cloudways.get_access_token(config.email, config.api_key)
        operation = cloudways.execute_varnish_action(token, config.server_id, config.action)

        if config.wait_for_completion:
            operation = cloudways.wait_for_completion(
                token, operation.id, config.max_attempts, config.interval_millis
            )
            ECHO("Operation completed successfully (ID: {})".format(operation.id))
        else:
            ECHO("Operation initiated (ID: {})".format(operation.id))
            ECHO("Use the operation ID to check status later")
    except Exception as err:  # pylint: disable=broad-except
        LOG.debug("Varnish action failed.", exc_info=True)
        error = err

    if operation is not None:
        completed = error is None and operation.is_completed
        try:
            _write_output_file(output_file, _summary(config, operation, completed=completed))
        except OSError as err:
            LOG.debug("Failed to write %s.", output_file, exc_info=True)
            error = error or err

    if error is not None:
        FAIL(1, "Error: {}".format(error))


if __name__ == "__main__":
    varnish_action()  # pylint: disable=no-value-for-parameter
