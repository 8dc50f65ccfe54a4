"""procon_gardener - archive your accepted AtCoder submissions."""

__version__ = "1.0.0"
