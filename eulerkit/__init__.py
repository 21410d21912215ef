"""Number-theory routines and a command line for classic puzzle problems."""

__version__ = "0.1.0"