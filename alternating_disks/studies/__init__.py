"""
Studies: Small experiments with the sorting algorithms.

Each study builds rows, sorts them, and prints what happened.

Study progression:
1. Swap counts - both algorithms side by side across row sizes
"""
