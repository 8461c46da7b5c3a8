from enum import StrEnum

from .datelike import DateLike, resolve_instant
from .signedduration import SignedDuration


class RoundTo(StrEnum):
  HOUR = 'hour'
  MINUTE = 'minute'
  SECOND = 'second'
  MILLISECOND = 'millisecond'


def duration(from_: DateLike | None, to: DateLike | None) -> SignedDuration:
  """Returns the time-of-day of `to` minus the time-of-day of `from_`.

  Only the wall-clock time is compared, the calendar dates are dropped. The result is negative when
  `from_` reads later on the clock than `to`, regardless of which instant comes first.

  >>> str(duration('2024-01-01T10:00:00', '2024-01-01T12:30:00'))
  '02:30:00.000'

  Raises:
    InvalidInputError: either argument is missing or is not a valid timestamp.
  """
  from_instant = resolve_instant(from_)
  to_instant = resolve_instant(to)
  return SignedDuration.from_date(to_instant).subtract(SignedDuration.from_date(from_instant))


def time_diff(from_: DateLike | None,
              to: DateLike | None,
              *,
              absolute: bool = False,
              round_to: RoundTo | str | None = None) -> SignedDuration:
  """Like `duration`, then optionally takes the absolute value and rounds, in that order.

  `round_to` values other than hour, minute and second leave the result unrounded.
  """
  diff = duration(from_, to)

  if absolute:
    diff = diff.abs()

  match round_to:
    case RoundTo.HOUR:
      return diff.round_to_hour()
    case RoundTo.MINUTE:
      return diff.round_to_minute()
    case RoundTo.SECOND:
      return diff.round_to_second()
    case _:
      return diff
