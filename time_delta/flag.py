from typing import TypeVar

from absl import flags

from .durationformat import DEFAULT_FORMAT
from .timediff import RoundTo

FROM_TIME = flags.DEFINE_string(
    name='from_time',
    default=None,
    required=True,
    help='Start timestamp, an ISO 8601 string (ex. 2024-01-01T10:00:00) or milliseconds since the epoch. '
    'Only the time of day is used.',
)
TO_TIME = flags.DEFINE_string(
    name='to_time',
    default=None,
    required=True,
    help='End timestamp, in the same forms as --from_time.',
)
ABSOLUTE = flags.DEFINE_bool(
    name='absolute',
    default=False,
    help='Drop the sign of the difference.',
)
ROUND_TO = flags.DEFINE_enum(
    name='round_to',
    default=None,
    enum_values=[round_to.value for round_to in RoundTo],
    help='Round the difference to the nearest unit, halves away from zero. '
    'Applied after --absolute.',
)
FORMAT = flags.DEFINE_string(
    name='format',
    default=DEFAULT_FORMAT,
    help='Output pattern. Tokens: hh, h, mm, m, ss, s, SSS, S. Everything else is printed as is.',
)


T = TypeVar('T')


def value_of(flag_holder: flags.FlagHolder[T]) -> T:
  """Returns the flag value, or the default when the flag was not given on the command line."""
  return flag_holder.value if flag_holder.present else flag_holder.default
