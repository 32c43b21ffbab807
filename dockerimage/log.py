'''
logging setup for the `dockerimage` cli; the library itself only emits records
'''

import copy
import logging
import sys

_BOLD = '\033[1m'
_RESET = '\033[0m'

_level_colours = {
    logging.DEBUG: '\033[34m',
    logging.INFO: '\033[32m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
}

LOG_FORMAT = '%(asctime)s [%(levelprefix)s] %(name)s: %(message)s'


class LevelColourFormatter(logging.Formatter):
    '''
    exposes `levelprefix` to format strings (coloured level name if stdout is a tty)
    '''
    def formatMessage(self, record):
        levelprefix = record.levelname
        if sys.stdout.isatty() and (colour := _level_colours.get(record.levelno)):
            levelprefix = f'{_BOLD}{colour}{levelprefix}{_RESET}'

        record = copy.copy(record)
        record.levelprefix = levelprefix
        return super().formatMessage(record)


def configure_logging(level=logging.WARNING):
    # replace existing handlers, so repeated calls do not emit records twice
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler()
    handler.setFormatter(LevelColourFormatter(fmt=LOG_FORMAT))

    logging.root.addHandler(handler)
    logging.root.setLevel(level)
