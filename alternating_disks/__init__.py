"""
Alternating Disks: sorting a row of light and dark disks with adjacent swaps

Start with 2n disks, dark and light in turn. End with every light disk on
the left and every dark disk on the right. Only neighbours may trade places.
"""

__version__ = "0.1.0"
