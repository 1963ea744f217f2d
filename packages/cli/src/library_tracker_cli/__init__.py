"""Library Tracker CLI - command-line front end for the flat-file book catalog."""

__version__ = "1.0.0"
