"""Infrastructure layer — external system integration.

This layer wraps all interaction with the BambooHR REST API and the
optional image libraries used to show profile photos.  Every
raw ``requests`` exception must be caught here and re-raised as a
:class:`~bhr.exceptions.BhrError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from bhr.infra.bamboohr_provider import BambooHRProvider
from bhr.infra.sixel_image import encode_sixel

__all__: list[str] = [
    "BambooHRProvider",
    "encode_sixel",
]
