from .config import StreamConfig, default_config, set_default_config
from .kernel import (
    Collector,
    ElementBudgetExceeded,
    Fn,
    FunctionalError,
    NoSuchElementError,
    NullReferenceError,
    Optional,
    Pred,
    Stream,
    StreamConsumedError,
    Trace,
    UnsupportedOperationError,
    collectors,
    compose,
    pipe,
    require_non_null,
)

__all__ = [
    # Containers
    "Optional",
    "Stream",
    "Collector",
    "collectors",
    # Function values
    "Fn",
    "Pred",
    "compose",
    "pipe",
    # Config
    "StreamConfig",
    "default_config",
    "set_default_config",
    # Tracing
    "Trace",
    # Errors
    "FunctionalError",
    "NoSuchElementError",
    "NullReferenceError",
    "UnsupportedOperationError",
    "StreamConsumedError",
    "ElementBudgetExceeded",
    "require_non_null",
]
