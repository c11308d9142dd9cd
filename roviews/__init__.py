"""Read-only List, Bag and Dict views over sequences and mappings."""

__version__ = "0.1.0"