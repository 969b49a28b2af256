"""fskit command line interface."""

from fskit import __version__
