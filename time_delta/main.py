from absl import app, logging

from . import flag
from .datelike import DateLike
from .timediff import time_diff


def _timestamp(s: str) -> DateLike:
  try:
    return int(s)
  except ValueError:
    pass
  return s


def main(args: list[str]) -> None:
  from_time = _timestamp(flag.value_of(flag.FROM_TIME))
  to_time = _timestamp(flag.value_of(flag.TO_TIME))
  absolute = flag.value_of(flag.ABSOLUTE)
  round_to = flag.value_of(flag.ROUND_TO)

  logging.info(f'Computing time of day difference from {from_time!r} to {to_time!r}')
  logging.debug(f'absolute: {absolute}, round_to: {round_to}')

  diff = time_diff(from_time, to_time, absolute=absolute, round_to=round_to)

  logging.info(f'Difference is {diff.total_milliseconds} ms')
  print(diff.to_string(flag.value_of(flag.FORMAT)))


def app_run_main() -> None:
  app.run(main)
