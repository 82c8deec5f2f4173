import logging

logger = logging.getLogger(__name__)


class MissingArgument(Exception):
    """A configuration field was left empty. Logged as fatal when raised."""

    def __init__(self, field_name):
        message = 'No value was given for "{}"'.format(field_name)
        logger.fatal(message)
        super(MissingArgument, self).__init__(message)
        self.field_name = field_name
