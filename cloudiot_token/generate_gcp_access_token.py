#!/usr/bin/env python3

import argparse
import asyncio
import json
import logging
import os
import sys

from cloudiot_token.config import AccessTokenConfig, DEFAULT_ALGORITHM, DEFAULT_CLOUD_REGION, default_project_id
from cloudiot_token.exchange import generate_gcp_access_token

COMMAND = 'generateGcpAccessToken'

# (config field, command line name)
ARGUMENTS = (
    ('cloud_region', 'cloudRegion'),
    ('project_id', 'projectId'),
    ('registry_id', 'registryId'),
    ('device_id', 'deviceId'),
    ('scopes', 'scopes'),
    ('algorithm', 'algorithm'),
    ('certificate_file', 'certificateFile'),
)

logger = logging.getLogger(__name__)


def add_access_token_arguments(parser, environ):
    parser.add_argument('command', choices=[COMMAND], help='Creates a GCP access token for the given device')

    # Positional values win over the options below
    for field, name in ARGUMENTS:
        parser.add_argument('positional_{}'.format(field), nargs='?', metavar=name, help='Same as --{}'.format(name))

    parser.add_argument('-c', '--cloudRegion', dest='cloud_region', default=DEFAULT_CLOUD_REGION,
                        help='The cloud region of the registry (default: %(default)s)')
    parser.add_argument('-p', '--projectId', dest='project_id', default=default_project_id(environ),
                        help='The Project ID to use. Defaults to the value of the GCLOUD_PROJECT or '
                             'GOOGLE_CLOUD_PROJECT environment variables.')
    parser.add_argument('-r', '--registryId', dest='registry_id', help='The Registry ID to use.')
    parser.add_argument('-d', '--deviceId', dest='device_id', help='The Device ID to use.')
    parser.add_argument('-s', '--scopes', dest='scopes',
                        help='The scope of the generated gcp token. Space delimited string.')
    parser.add_argument('-a', '--algorithm', dest='algorithm', default=DEFAULT_ALGORITHM,
                        help='The algorithm for the device certificate (default: %(default)s)')
    parser.add_argument('--certificateFile', dest='certificate_file', help='Path to the device private key.')


def check_access_token_arguments(parser, config):
    for field, _ in ARGUMENTS:
        positional_value = getattr(config, 'positional_{}'.format(field))
        if positional_value is not None:
            setattr(config, field, positional_value)

    missing = [name for field, name in ARGUMENTS if not getattr(config, field)]
    if missing:
        parser.error('the following arguments are required: {}'.format(', '.join(missing)))

    return AccessTokenConfig.from_args(config)


def parse_config(argv=None, environ=None):
    """Reads the command line (sys.argv if `argv` is None) and the environment once"""
    if environ is None:
        environ = os.environ

    parser = argparse.ArgumentParser(description='Generate a GCP access token for a Cloud IoT device.')
    add_access_token_arguments(parser, environ)
    # Options may be given before, after or between the positional values
    config = parser.parse_intermixed_args(argv)
    return check_access_token_arguments(parser, config)


def main():
    from cloudiot_token import main_logging
    main_logging.init()

    config = parse_config()
    result = asyncio.run(generate_gcp_access_token(config))
    if not result.ok:
        logger.error('No access token could be generated for device "{}"'.format(config.device_id))
        sys.exit(1)

    # Text bodies are printed as received
    print(result.token if isinstance(result.token, str) else json.dumps(result.token))


__name__ == '__main__' and main()
