"""recordrules: declarative field and record validation for request objects."""

__version__ = "0.1.0"
