"""Kernel layer - functional building blocks for fpkata."""

from fpkata.kernel import collectors
from fpkata.kernel.collectors import Collector
from fpkata.kernel.errors import (
    ElementBudgetExceeded,
    FunctionalError,
    NoSuchElementError,
    NullReferenceError,
    StreamConsumedError,
    UnsupportedOperationError,
    require_non_null,
)
from fpkata.kernel.functions import (
    BiFn,
    BiFunction,
    BinaryOperator,
    Consumer,
    Fn,
    Function,
    Greeting,
    GreetingAdapter,
    Pred,
    Predicate,
    Supplier,
    UnaryOperator,
    and_then_consumer,
    compose,
    identity,
    max_by,
    min_by,
    pipe,
)
from fpkata.kernel.immutable import (
    Address,
    AddressRecord,
    Circle,
    ImmutableData,
    UnmodifiableListView,
    freeze,
)
from fpkata.kernel.optional import Optional
from fpkata.kernel.stream import Stream
from fpkata.kernel.trace import Evidence, Trace

__all__ = [
    # Function values
    "Fn",
    "BiFn",
    "Pred",
    "identity",
    "compose",
    "pipe",
    "and_then_consumer",
    "min_by",
    "max_by",
    # Function types
    "Predicate",
    "Consumer",
    "Supplier",
    "Function",
    "BiFunction",
    "UnaryOperator",
    "BinaryOperator",
    "Greeting",
    "GreetingAdapter",
    # Containers
    "Optional",
    "Stream",
    "Collector",
    "collectors",
    # Immutability
    "Address",
    "AddressRecord",
    "Circle",
    "ImmutableData",
    "UnmodifiableListView",
    "freeze",
    # Tracing
    "Evidence",
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
