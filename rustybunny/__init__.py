"""A terminal arcade game: get the bunny across hedges and a log-strewn river."""

__version__ = "0.1.0"