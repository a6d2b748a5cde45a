from .errors import ConfigError
from .models import LoadResult, SummaryStats, TimingSample, RequestFailure
from .scheduler import run, run_load
from .stats import reduce
from .version import __version__
