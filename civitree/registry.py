"""Cities and their residents, kept in insertion order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

MAX_CITIES = 5
MAX_NAME = 50


class RegistryError(Exception):
    """Base class for registry failures."""


class CityNotFoundError(RegistryError):
    """No city with the requested name exists."""

    def __init__(self, city_name: str) -> None:
        super().__init__(f"Kota '{city_name}' tidak ditemukan.")
        self.city_name = city_name


class ResidentNotFoundError(RegistryError):
    """The city has no resident with the requested name."""

    def __init__(self, city_name: str, resident_name: str) -> None:
        super().__init__(
            f"Warga '{resident_name}' tidak ditemukan di kota '{city_name}'."
        )
        self.city_name = city_name
        self.resident_name = resident_name


class RegistryFullError(RegistryError):
    """The registry already holds its maximum number of cities."""

    def __init__(self, limit: int) -> None:
        super().__init__("Jumlah kota sudah mencapai batas maksimal!")
        self.limit = limit


@dataclass
class City:
    """A named city with an ordered list of residents."""

    name: str
    residents: list[str] = field(default_factory=list)

    def add_resident(self, name: str) -> None:
        """Append a resident at the end of the list."""
        self.residents.append(name)

    def remove_resident(self, name: str) -> None:
        """Remove the first resident with this name."""
        try:
            self.residents.remove(name)
        except ValueError:
            raise ResidentNotFoundError(self.name, name) from None

    def clear(self) -> None:
        """Remove every resident."""
        self.residents.clear()

    def render(self) -> str:
        """The resident lines as shown in listings."""
        if not self.residents:
            return "  Tidak ada warga\n"
        return "".join(f"  - {resident}\n" for resident in self.residents)


class CityRegistry:
    """An ordered collection of cities, optionally bounded in size."""

    def __init__(self, max_cities: int | None = MAX_CITIES) -> None:
        if max_cities is not None and max_cities < 0:
            raise ValueError("max_cities must not be negative")
        self.max_cities = max_cities
        self._cities: list[City] = []

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __contains__(self, name: object) -> bool:
        return any(city.name == name for city in self._cities)

    def find(self, name: str) -> City:
        """Return the first city with this name."""
        for city in self._cities:
            if city.name == name:
                return city
        raise CityNotFoundError(name)

    def add_city(self, name: str) -> City:
        """Append a new, empty city."""
        if self.max_cities is not None and len(self._cities) >= self.max_cities:
            raise RegistryFullError(self.max_cities)
        city = City(name)
        self._cities.append(city)
        return city

    def remove_city(self, name: str) -> City:
        """Remove the first city with this name, together with its residents."""
        city = self.find(name)
        self._cities.remove(city)
        removed = City(city.name, list(city.residents))
        city.clear()
        return removed

    def add_resident(self, city_name: str, resident_name: str) -> None:
        """Append a resident to the named city."""
        self.find(city_name).add_resident(resident_name)

    def remove_resident(self, city_name: str, resident_name: str) -> None:
        """Remove a resident from the named city."""
        self.find(city_name).remove_resident(resident_name)

    def residents(self, city_name: str) -> list[str]:
        """A copy of the named city's residents, in order."""
        return list(self.find(city_name).residents)

    def render_city(self, city_name: str) -> str:
        """The listing of one city's residents."""
        city = self.find(city_name)
        return f"\nWarga di kota {city_name}:\n" + city.render()

    def render_all(self) -> str:
        """The listing of every city and its residents."""
        if not self._cities:
            return "\nBelum ada kota.\n"
        return "".join(f"\nKota: {city.name}\n" + city.render() for city in self._cities)