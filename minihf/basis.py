"""Cartesian coordinates and contracted s-type Gaussian basis functions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator

STO3G_HYDROGEN_ALPHAS = (0.3425250914e01, 0.6239137298e00, 0.1688554040e00)
STO3G_HYDROGEN_COEFFS = (0.1543289673e00, 0.5353281423e00, 0.4446345422e00)


@dataclass(frozen=True)
class Coord:
    """A point or vector in three dimensions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Coord:
        return Coord(scalar * self.x, scalar * self.y, scalar * self.z)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Coord:
        return Coord(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Coord) -> float:
        """Return the scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z


@dataclass(frozen=True)
class PrimitiveGaussian:
    """A normalised s-type primitive Gaussian with its contraction coefficient."""

    alpha: float
    coeff: float

    @property
    def norm(self) -> float:
        """Normalisation constant (2 alpha / pi) ** 0.75."""
        return (2.0 * self.alpha / math.pi) ** 0.75

    def __str__(self) -> str:
        return f"primitive_gaussian(alpha={self.alpha:g}, coeff={self.coeff:g})"


@dataclass
class AtomicOrbital:
    """A contraction of primitive Gaussians sharing one centre."""

    primitives: list[PrimitiveGaussian] = field(default_factory=list)
    coords: Coord = field(default_factory=Coord)

    def append(self, primitive: PrimitiveGaussian) -> None:
        """Add a primitive to the contraction."""
        self.primitives.append(primitive)

    def __len__(self) -> int:
        return len(self.primitives)

    def __getitem__(self, index: int) -> PrimitiveGaussian:
        return self.primitives[index]

    def __iter__(self) -> Iterator[PrimitiveGaussian]:
        return iter(self.primitives)

    def __str__(self) -> str:
        return "".join(f"{primitive}\n" for primitive in self.primitives)


@dataclass
class Molecule:
    """A set of atomic orbitals with the nuclear charges and positions."""

    orbitals: list[AtomicOrbital] = field(default_factory=list)
    charges: list[int] = field(default_factory=list)
    coord_list: list[Coord] = field(default_factory=list)

    def append(self, orbital: AtomicOrbital) -> None:
        """Add an atomic orbital to the basis."""
        self.orbitals.append(orbital)

    def __len__(self) -> int:
        return len(self.orbitals)

    def __getitem__(self, index: int) -> AtomicOrbital:
        return self.orbitals[index]

    def __iter__(self) -> Iterator[AtomicOrbital]:
        return iter(self.orbitals)


def sto3g_hydrogen(coords: Coord | Iterable[float]) -> AtomicOrbital:
    """Return the STO-3G 1s orbital of hydrogen centred at ``coords``."""
    centre = coords if isinstance(coords, Coord) else Coord(*coords)
    primitives = [
        PrimitiveGaussian(alpha, coeff)
        for alpha, coeff in zip(STO3G_HYDROGEN_ALPHAS, STO3G_HYDROGEN_COEFFS)
    ]
    return AtomicOrbital(primitives, centre)