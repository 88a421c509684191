"""ProfileHub: account signup, login and profile editing over a JSON file store."""

__version__ = "0.1.0"
