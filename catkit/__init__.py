"""catkit - concatenate files to standard output"""

__version__ = '1.0.0'
