class ArityMismatch(ValueError):
  """A fixed-width compression function was given the wrong number of inputs"""

class MalformedKeyError(ValueError):
  """Key string is malformed or out of range"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
