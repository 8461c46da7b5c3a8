from .durationformat import DEFAULT_FORMAT, DurationFormat, format_milliseconds
from .errors import DivisionByZeroError, FormatMismatchError, InvalidInputError, TimeDeltaError
from .signedduration import SignedDuration
from .timediff import RoundTo, duration, time_diff

__all__ = [
    'DEFAULT_FORMAT',
    'DivisionByZeroError',
    'DurationFormat',
    'FormatMismatchError',
    'InvalidInputError',
    'RoundTo',
    'SignedDuration',
    'TimeDeltaError',
    'duration',
    'format_milliseconds',
    'time_diff',
]
