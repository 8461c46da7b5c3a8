class TimeDeltaError(Exception):
  pass


class InvalidInputError(TimeDeltaError, ValueError):
  pass


class FormatMismatchError(TimeDeltaError, ValueError):
  pass


class DivisionByZeroError(TimeDeltaError, ZeroDivisionError):
  pass
