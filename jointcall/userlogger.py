import logging
import logging.config
import yaml
import os


def set_logger(config_path=None):
    """Configure logging from a YAML dictConfig file.

    Defaults to the logging.yaml shipped with the package.
    """
    if config_path is None:
        script_path = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(script_path, 'logging.yaml')
    with open(config_path, 'r') as stream:
        config = yaml.load(stream, Loader=yaml.FullLoader)
    logging.config.dictConfig(config)
    rootlogger = logging.getLogger('root')
    cmdlogger = logging.getLogger('cmd')
    timelogger = logging.getLogger('ptime')
    return [rootlogger, cmdlogger, timelogger]
