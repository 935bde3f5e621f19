"""DocLens - keyword search over local CSV and PDF documents."""

__version__ = "0.1.0"
