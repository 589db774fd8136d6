"""Flask API serving drug history and organization records from a MedTrace ledger contract."""

__version__ = "0.1.0"