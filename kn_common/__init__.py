from kn_common.core_utils import LOG, LOG_EXCEPTION, LOG_TO_STDERR, is_platform_windows
from kn_common.constants import *
