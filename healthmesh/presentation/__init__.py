"""
Presentation Layer Package

HTTP controllers exposing the health query surface.
"""

from healthmesh.presentation import controllers

__all__ = ["controllers"]
