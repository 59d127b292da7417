from jubsig.btree import digest
from jubsig.cli.inputs import read_inputs


def main_digest(args):
  names = args.files or ["-"]
  for name, data in zip(names, read_inputs(args.files)):
    name = "-" if name is True else name
    print(f"{digest(data).hex()}  {name}")
