"""Classic Unix text utilities: cat, head, wc, uniq, cut, comm, grep, find, tail, fortune, echo, cal."""

__version__ = "0.1.0"
