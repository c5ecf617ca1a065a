"""bhr — command line interface for BambooHR.

Rebuilds the organisation chart from the employee directory and prints
it, or shows the details of a single employee.
"""

from bhr.version import __version__

__all__: list[str] = ["__version__"]
