"""Google Drive folder inventory scanner."""

__version__ = "0.1.0"
