"""
Study 01: Swap Counts

Questions to explore:
- Do both algorithms really make the same number of swaps?
- How much fewer passes does the lawnmower need?
- How does the swap count grow with n?
"""
