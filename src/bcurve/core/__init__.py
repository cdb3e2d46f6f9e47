from .config import dotdict, default_config, load_config, dump_config
from .report import report
