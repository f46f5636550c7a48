"""FreediveComp: AIDA/CMAS competition timer."""

__version__ = "0.1.0"
