import math
from datetime import datetime

from .errors import InvalidInputError

DateLike = datetime | str | int | float


def resolve_instant(value: DateLike | None) -> datetime:
  """Resolves a timestamp-like value to a local wall-clock datetime.

  Accepts a datetime (aware values are converted to local time, naive values are taken as local
  already), an ISO 8601 string, or a number of milliseconds since the Unix epoch.

  Raises:
    InvalidInputError: `value` is missing, malformed, not a number, or out of range.
  """
  if value is None:
    raise InvalidInputError('expected a timestamp, got None')

  if isinstance(value, datetime):
    return value if value.tzinfo is None else value.astimezone()

  if isinstance(value, str):
    try:
      instant = datetime.fromisoformat(value)
    except ValueError as e:
      raise InvalidInputError(f'invalid timestamp string "{value}"') from e
    return instant if instant.tzinfo is None else instant.astimezone()

  if isinstance(value, (int, float)) and not isinstance(value, bool):
    if not math.isfinite(value):
      raise InvalidInputError(f'invalid epoch milliseconds {value}')
    try:
      return datetime.fromtimestamp(value / 1000)
    except (OverflowError, OSError, ValueError) as e:
      raise InvalidInputError(f'epoch milliseconds {value} out of range') from e

  raise InvalidInputError(f'unsupported timestamp type {type(value).__name__}')
