"""
The root tests directory keeps this __init__.py, while test subdirectories have none.

Keeping it here makes pytest treat tests/ as a package, so imports behave the same in every
environment. Subdirectories work as namespace packages (PEP 420), which is why every test
module name under tests/ must stay unique.
"""
