"""Course management for admins, professors and students over JSON files."""

__version__ = "0.1.0"