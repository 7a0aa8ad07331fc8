import numpy as np
import pytest

from minihf.basis import Coord, Molecule, sto3g_hydrogen
from minihf.integrals import (
    electron_electron_repulsion,
    electron_nuclear_attraction,
    kinetic,
    nuclear_nuclear_repulsion_energy,
    overlap,
)
from minihf.scf import compute_density_matrix, compute_g, electronic_energy, scf_cycle


def _h2(distance):
    a = sto3g_hydrogen(Coord(0.0, 0.0, 0.0))
    b = sto3g_hydrogen(Coord(0.0, 0.0, distance))
    return Molecule([a, b], [1, 1], [a.coords, b.coords])


def _terms(mol):
    return (
        overlap(mol),
        kinetic(mol),
        electron_nuclear_attraction(mol, mol.charges),
        electron_electron_repulsion(mol),
    )


def test_density_matrix_from_identity():
    density = compute_density_matrix(np.eye(3), 1)
    expected = np.zeros((3, 3))
    expected[0, 0] = 2.0
    assert np.allclose(density, expected)


def test_density_matrix_is_symmetric_and_counts_electrons():
    rng = np.random.default_rng(0)
    q, _ = np.linalg.qr(rng.normal(size=(4, 4)))
    density = compute_density_matrix(q, 2)
    assert np.allclose(density, density.T)
    assert float(np.diag(density).sum()) == pytest.approx(4.0)
    assert np.allclose(density @ density, 2.0 * density)


def test_g_vanishes_for_zero_density():
    vee = electron_electron_repulsion(_h2(1.4))
    assert np.allclose(compute_g(np.zeros((2, 2)), vee), 0.0)


def test_g_is_linear_in_density():
    vee = electron_electron_repulsion(_h2(1.4))
    d = np.array([[0.6, 0.6], [0.6, 0.6]])
    assert np.allclose(compute_g(2.0 * d, vee), 2.0 * compute_g(d, vee))
    g = compute_g(d, vee)
    assert np.allclose(g, g.T)


def test_electronic_energy_zero_density():
    mol = _h2(1.4)
    _, t, vne, _ = _terms(mol)
    assert electronic_energy(np.zeros((2, 2)), t, vne, np.ones((2, 2))) == 0.0


def test_electronic_energy_counts_half_of_g():
    zero = np.zeros((2, 2))
    density = np.eye(2)
    g = np.eye(2)
    assert electronic_energy(density, zero, zero, g) == pytest.approx(
        0.5 * electronic_energy(density, g, zero, zero)
    )


def test_scf_h2_reference_total_energy():
    mol = _h2(1.4)
    energy = scf_cycle(_terms(mol), mol, 1e-8, 50)
    total = energy + nuclear_nuclear_repulsion_energy(mol.coord_list, mol.charges)
    assert total == pytest.approx(-1.1167, abs=1e-3)


def test_scf_converges_consistently():
    mol = _h2(1.0)
    terms = _terms(mol)
    loose = scf_cycle(terms, mol, 1e-5, 20)
    tight = scf_cycle(terms, mol, 1e-12, 100)
    assert loose < 0
    assert loose == pytest.approx(tight, abs=1e-4)


def test_scf_zero_iterations_returns_zero():
    mol = _h2(1.0)
    assert scf_cycle(_terms(mol), mol, 1e-5, 0) == 0.0


def test_scf_rejects_singular_overlap():
    mol = _h2(1.0)
    s, t, vne, vee = _terms(mol)
    with pytest.raises(ValueError):
        scf_cycle((np.ones((2, 2)), t, vne, vee), mol, 1e-5, 5)