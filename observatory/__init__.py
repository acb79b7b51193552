"""Signal pipeline, indicator models, report structures and scenario simulations."""

__version__ = "0.1.0"