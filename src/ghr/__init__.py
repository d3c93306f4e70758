"""ghr: resolve repository references into identities, URLs and paths."""

__version__ = "0.1.0"
