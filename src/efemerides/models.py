"""Data models for efemérides."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FetchedEvent:
    """An event as returned by the API.

    Attributes:
        titulo: Event title.
        evento: Event description.
    """

    titulo: str
    evento: str


@dataclass(frozen=True)
class EventRecord:
    """A favorite event, tied to the date it was shown for.

    Attributes:
        titulo: Event title. Favorite membership is checked on this alone.
        evento: Event description.
        fecha: Display date, ``D/M/YYYY``.
    """

    titulo: str
    evento: str
    fecha: str

    @property
    def key(self) -> tuple[str, str]:
        """Identity used to remove one specific record."""
        return (self.titulo, self.fecha)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"titulo": self.titulo, "evento": self.evento, "fecha": self.fecha}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EventRecord":
        """Create from dictionary."""
        return cls(
            titulo=str(data["titulo"]),
            evento=str(data["evento"]),
            fecha=str(data["fecha"]),
        )
