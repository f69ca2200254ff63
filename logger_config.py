import copy
import logging
import logging.config

log_config_dict = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s-%(levelname)s-%(module)s: %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'to_console': {
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
            'level': 'DEBUG',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['to_console'],
        'level': 'WARNING',
    },
}


def verbosity_to_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbosity: int = 0):
    """
    Apply log_config_dict, with the root level picked from the -v count.
    """
    config = copy.deepcopy(log_config_dict)
    config['root']['level'] = logging.getLevelName(verbosity_to_level(verbosity))
    logging.config.dictConfig(config)
    return config
