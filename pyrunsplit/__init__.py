"""pyrunsplit - split sequences into contiguous runs at predicate matches."""

from .split_config import SplitConfig
from .splitter import RunSplitter, split, split_after, split_before
from .types import Mode, RunSpan, Trace, TraceEvent
from .views import SequenceView

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "Mode",
    "RunSpan",
    "RunSplitter",
    "SequenceView",
    "SplitConfig",
    "Trace",
    "TraceEvent",
    "split",
    "split_after",
    "split_before",
]
