"""One- and two-electron integrals over contracted s-type Gaussians."""

from __future__ import annotations

import math
from itertools import combinations, product
from typing import Sequence

import numpy as np
from scipy.special import gamma, gammainc

from minihf.basis import AtomicOrbital, Coord, Molecule, PrimitiveGaussian


def boys(x: float, n: int) -> float:
    """Return the Boys function F_n(x)."""
    if x == 0:
        return 1.0 / (2 * n + 1)
    return float(gammainc(n + 0.5, x) * gamma(n + 0.5) / (2.0 * x ** (n + 0.5)))


def _product(
    a: AtomicOrbital, pa: PrimitiveGaussian, b: AtomicOrbital, pb: PrimitiveGaussian
) -> tuple[float, Coord, float]:
    """Exponent, centre and prefactor of the product of two primitives."""
    p = pa.alpha + pb.alpha
    centre = (pa.alpha * a.coords + pb.alpha * b.coords) / p
    q = pa.alpha * pb.alpha / p
    diff = a.coords - b.coords
    prefactor = pa.norm * pb.norm * pa.coeff * pb.coeff * math.exp(-q * diff.dot(diff))
    return p, centre, prefactor


def _primitive_pairs(a: AtomicOrbital, b: AtomicOrbital):
    for pa, pb in product(a, b):
        yield pa, pb, _product(a, pa, b, pb)


def overlap(mol: Molecule) -> np.ndarray:
    """Return the overlap matrix S."""
    n = len(mol)
    s = np.zeros((n, n))
    for i, j in product(range(n), repeat=2):
        for _, _, (p, _, pref) in _primitive_pairs(mol[i], mol[j]):
            s[i, j] += pref * (math.pi / p) ** 1.5
    return s


def kinetic(mol: Molecule) -> np.ndarray:
    """Return the kinetic energy matrix T."""
    n = len(mol)
    t = np.zeros((n, n))
    for i, j in product(range(n), repeat=2):
        b = mol[j]
        for _, pb, (p, centre, pref) in _primitive_pairs(mol[i], b):
            s = pref * (math.pi / p) ** 1.5
            pg = centre - b.coords
            beta = pb.alpha
            t[i, j] += 3.0 * beta * s
            for component in pg:
                t[i, j] -= 2.0 * beta * beta * s * (component * component + 0.5 / p)
    return t


def _unique_centres(mol: Molecule) -> list[Coord]:
    return sorted({orbital.coords for orbital in mol}, key=tuple)


def electron_nuclear_attraction(mol: Molecule, charges: Sequence[int]) -> np.ndarray:
    """Return the electron-nuclear attraction matrix.

    The nuclei are taken at the distinct orbital centres in lexicographic
    order, paired in turn with ``charges``.
    """
    centres = _unique_centres(mol)
    if len(charges) > len(centres):
        raise ValueError(
            f"{len(charges)} charges given but only {len(centres)} distinct centres"
        )
    n = len(mol)
    v = np.zeros((n, n))
    for charge, nucleus in zip(charges, centres):
        for i, j in product(range(n), repeat=2):
            for _, _, (p, centre, pref) in _primitive_pairs(mol[i], mol[j]):
                pg = centre - nucleus
                v[i, j] += (
                    pref * -charge * (2.0 * math.pi / p) * boys(p * pg.dot(pg), 0)
                )
    return v


def electron_electron_repulsion(mol: Molecule) -> np.ndarray:
    """Return the two-electron integrals (ij|kl) in chemists' order."""
    n = len(mol)
    pairs = {
        (i, j): [data for _, _, data in _primitive_pairs(mol[i], mol[j])]
        for i, j in product(range(n), repeat=2)
    }
    v = np.zeros((n, n, n, n))
    for i, j, k, l in product(range(n), repeat=4):
        total = 0.0
        for pij, cij, fij in pairs[i, j]:
            for pkl, ckl, fkl in pairs[k, l]:
                diff = cij - ckl
                denom = 1.0 / pij + 1.0 / pkl
                total += (
                    fij
                    * fkl
                    * 2.0
                    * math.pi
                    * math.pi
                    / (pij * pkl)
                    * math.sqrt(math.pi / (pij + pkl))
                    * boys(diff.dot(diff) / denom, 0)
                )
        v[i, j, k, l] = total
    return v


def nuclear_nuclear_repulsion_energy(
    coords: Sequence[Coord], charges: Sequence[int]
) -> float:
    """Return the Coulomb repulsion energy between point nuclei."""
    if len(coords) != len(charges):
        raise ValueError("coords and charges must have the same length")
    energy = 0.0
    for (ri, zi), (rj, zj) in combinations(zip(coords, charges), 2):
        diff = ri - rj
        energy += (zi * zj) / math.sqrt(diff.dot(diff))
    return energy