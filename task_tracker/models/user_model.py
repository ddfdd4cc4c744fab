from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """Authenticated identity supplied by an AuthProvider.

    Only ``id`` takes part in ownership checks.
    """

    id: str
    display_name: str = ""
