"""
PM_Libs - Pixel Manipulator Library Modules

This package contains the core functionality for the Pixel Manipulator project,
organized into specialized sub-packages:

- ImageEditingLib: Colour model, pixel grid, image I/O and transformations
- ProcessingLib: Named operation registry and step pipelines
"""

__version__ = "0.1.0"
