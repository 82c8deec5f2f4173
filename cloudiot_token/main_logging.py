import logging
import sys

# Their debug output would end up next to the token exchange logs
QUIET_LOGGERS = ('aiohttp', 'asyncio')


def init(level=logging.DEBUG):
    """Sends every log record to stderr, stdout only carries the access token"""
    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    logging.basicConfig(format=FORMAT, level=level, stream=sys.stderr)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
