"""Career-motivation micro-niche opportunity scanner."""

__version__ = "0.1.0"
