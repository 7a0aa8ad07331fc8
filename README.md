# minihf

A small restricted Hartree-Fock (RHF) solver for molecules described by
contracted s-type Gaussian basis functions. It computes the one- and
two-electron integrals analytically, runs a self-consistent field cycle and
reports the total energy.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
minihf
```

This builds H2 with the STO-3G basis, places one hydrogen nucleus at the
origin and the other on the z axis, runs the SCF cycle and prints the total
energy (electronic energy plus nuclear repulsion) in hartree:

```
Total energy: <value>
```

Options:

- `--bond-length` — H-H distance in bohr (default `1.0`)
- `--tolerance` — stop when the energy changes by less than this (default `1e-5`)
- `--max-iter` — maximum number of SCF iterations (default `20`)

## Library use

```python
from minihf.basis import Coord, Molecule, sto3g_hydrogen
from minihf.integrals import (
    overlap,
    kinetic,
    electron_nuclear_attraction,
    electron_electron_repulsion,
    nuclear_nuclear_repulsion_energy,
)
from minihf.scf import scf_cycle
from minihf.cli import total_energy

h1 = sto3g_hydrogen(Coord(0.0, 0.0, 0.0))
h2 = sto3g_hydrogen(Coord(0.0, 0.0, 1.0))
mol = Molecule([h1, h2], charges=[1, 1], coord_list=[h1.coords, h2.coords])

s = overlap(mol)
t = kinetic(mol)
vne = electron_nuclear_attraction(mol, mol.charges)
vee = electron_electron_repulsion(mol)
e_nn = nuclear_nuclear_repulsion_energy(mol.coord_list, mol.charges)

e_elec = scf_cycle((s, t, vne, vee), mol, 1e-5, 20)
print(e_elec + e_nn)

# or in one step
print(total_energy(mol, 1e-5, 20))
```

The building blocks:

- `minihf.basis`: `Coord` (a 3-vector with `+`, `-`, scalar `*`, `/` and
  `dot`), `PrimitiveGaussian` (exponent, coefficient and `norm`),
  `AtomicOrbital` (primitives sharing a centre), `Molecule` (orbitals,
  `charges` and `coord_list`) and `sto3g_hydrogen` for a hydrogen 1s STO-3G
  orbital.
- `minihf.integrals`: the Boys function `boys`, the `overlap`, `kinetic`,
  `electron_nuclear_attraction` and `electron_electron_repulsion` integrals
  as NumPy arrays, and `nuclear_nuclear_repulsion_energy`.
- `minihf.scf`: `compute_density_matrix`, `compute_g`, `electronic_energy`
  and `scf_cycle`.
- `minihf.cli`: `format_matrix` and `format_tensor4d` for fixed-width text
  output, `total_energy`, and the `main` entry point.

Notes on behaviour:

- `electron_nuclear_attraction` places the nuclei at the distinct orbital
  centres, sorted lexicographically, and pairs them in turn with the given
  charges; it raises `ValueError` if there are more charges than centres.
- `nuclear_nuclear_repulsion_energy` raises `ValueError` when the coordinate
  and charge lists differ in length.
- `scf_cycle` raises `ValueError` if the overlap matrix is not positive
  definite.

## Limitations

Only s-type functions are handled, the only built-in basis is STO-3G for
hydrogen, and the SCF occupies a single doubly occupied orbital, so the
solver is meant for two-electron systems such as H2. The command line
computes H2 only; there is no input file format for other molecules.