import os

import structlog

from nbtree.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['NBTREE_CONFIG_YAML'] = os.environ.get('NBTREE_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

# log events are only observed through capture_logs, nothing is printed
structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
