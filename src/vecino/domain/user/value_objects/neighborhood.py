from enum import Enum


class Neighborhood(str, Enum):
    """Neighborhoods a resident can live in."""

    LA_TAONA = "La Taona"
    POCITOS = "Pocitos"
    MALVIN = "Malvín"
    OTHER = "Otro"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


DEFAULT_NEIGHBORHOOD = Neighborhood.LA_TAONA
