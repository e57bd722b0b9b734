from .finder import (
    InvalidDimensions,
    MalformedInput,
    MaxAverageError,
    Solution,
    best_window,
    format_average,
    max_average,
    parse_sequence,
    parse_tokens,
    prefix_sums,
)

__version__ = "0.1.0"
