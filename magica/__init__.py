"""Turn-based terminal battle game between two small armies: rules, save files and curses screens."""

__version__ = "0.1.0"
__all__ = ["__version__"]