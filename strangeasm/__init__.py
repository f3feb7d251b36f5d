"""First pass of a two-pass assembler for a 10-bit machine, with strange base-4 conversions."""

__version__ = "0.1.0"