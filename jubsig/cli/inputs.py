import os
import sys
from typing import List

from jubsig.exceptions import CliArgError


def read_inputs(files) -> List[bytes]:
  """Contents of each file, with True or no files at all meaning stdin."""
  if not files:
    files = [True]
  chunks = []
  for f in files:
    if f is True:
      chunks.append(sys.stdin.buffer.read())
      continue
    with open(f, "rb") as fh:
      chunks.append(fh.read())
  return chunks


def read_token(value: str) -> str:
  """A key or signature given directly on command line or as a file name."""
  if os.path.isfile(value):
    with open(value, encoding="utf-8") as fh:
      return fh.read().strip()
  return value


def single(values: list, what: str) -> str:
  if not values:
    raise CliArgError(f"Missing {what}")
  if len(values) > 1:
    raise CliArgError(f"Only one {what} may be specified")
  return read_token(values[0])
