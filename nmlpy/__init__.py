"""Matrices, row echelon forms, LUP and QR decompositions in plain Python."""

__version__ = "0.1.0"

__all__ = ["matrix", "echelon", "lup", "qr", "demos"]