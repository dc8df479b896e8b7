"""pyezui: render a Tk user interface from a declarative YAML configuration."""

__version__ = "0.1.0"
