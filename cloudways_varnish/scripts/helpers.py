"""
Common helper methods to use in cloudways_varnish scripts.
"""
import sys

import click
import yaml


def _log(kind, message):
    """
    Convenience method to log text. Prepended "kind" text makes finding log entries easier.
    """
    click.echo('{}: {}'.format(kind, message))


def _fail(kind, code, message):
    """
    Convenience method to fail out of the command with a single-line message on stderr.
    """
    click.secho('{}: {}'.format(kind, message), fg='red', err=True)
    sys.exit(code)


def _write_output_file(output_file, info):
    """
    Writes the given info as a YAML document, if an output file was requested.
    """
    if not output_file:
        return
    with open(output_file, 'w') as stream:
        yaml.safe_dump(info, stream, default_flow_style=False, explicit_start=True)
