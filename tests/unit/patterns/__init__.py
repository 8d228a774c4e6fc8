"""Pattern example tests package.

Each module checks the fixed example of one pattern and the edge cases its
classes guard against.
"""
