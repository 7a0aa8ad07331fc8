"""Restricted Hartree-Fock self-consistent field iterations."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from minihf.basis import Molecule

OCCUPATION = 2.0


def compute_density_matrix(mos, n_occ: int) -> np.ndarray:
    """Return the closed-shell density matrix from MO coefficients (columns)."""
    occupied = np.asarray(mos, dtype=float)[:, :n_occ]
    return OCCUPATION * occupied @ occupied.T


def compute_g(density, vee) -> np.ndarray:
    """Return the two-electron part of the Fock matrix, J - K/2."""
    d = np.asarray(density, dtype=float)
    v = np.asarray(vee, dtype=float)
    coulomb = np.einsum("kl,ijkl->ij", d, v)
    exchange = np.einsum("kl,ilkj->ij", d, v)
    return coulomb - 0.5 * exchange


def electronic_energy(density, t, vne, g) -> float:
    """Return the electronic energy sum D (Hcore + G/2)."""
    hcore = np.asarray(t, dtype=float) + np.asarray(vne, dtype=float)
    d = np.asarray(density, dtype=float)
    return float(np.sum(d * (hcore + 0.5 * np.asarray(g, dtype=float))))


def _inverse_sqrt(s: np.ndarray) -> np.ndarray:
    values, vectors = np.linalg.eigh(s)
    if np.any(values <= 0):
        raise ValueError("overlap matrix is not positive definite")
    return vectors @ np.diag(values**-0.5) @ vectors.T


def scf_cycle(
    molecular_terms: Sequence,
    mol: Molecule,
    tolerance: float = 1e-5,
    max_iter: int = 20,
) -> float:
    """Iterate the SCF equations and return the electronic energy.

    ``molecular_terms`` is (S, T, Vne, Vee). One doubly occupied orbital is
    used. Iteration stops when the energy changes by less than ``tolerance``
    or after ``max_iter`` steps.
    """
    s, t, vne, vee = (np.asarray(term, dtype=float) for term in molecular_terms)
    n = len(mol)
    density = np.zeros((n, n))
    hcore = t + vne
    s_inv_sqrt = _inverse_sqrt(s)
    energy = 0.0

    for _ in range(max_iter):
        previous = energy
        g = compute_g(density, vee)
        fock = hcore + g
        fock_orthogonal = s_inv_sqrt @ fock @ s_inv_sqrt
        try:
            _, eigenvectors = np.linalg.eigh(fock_orthogonal)
        except np.linalg.LinAlgError as exc:
            raise RuntimeError("Eigenvalue decomposition failed") from exc
        mos = s_inv_sqrt @ eigenvectors
        density = compute_density_matrix(mos, 1)
        energy = electronic_energy(density, t, vne, g)
        if abs(energy - previous) < tolerance:
            break
    return energy