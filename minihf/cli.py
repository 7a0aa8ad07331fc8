"""Command line entry point computing the H2 ground-state energy."""

from __future__ import annotations

import argparse
from typing import Sequence

from minihf.basis import Coord, Molecule, sto3g_hydrogen
from minihf.integrals import (
    electron_electron_repulsion,
    electron_nuclear_attraction,
    kinetic,
    nuclear_nuclear_repulsion_energy,
    overlap,
)
from minihf.scf import scf_cycle


def _format_number(value: float) -> str:
    return f"{value:10.6f} "


def format_matrix(mat) -> str:
    """Render a matrix one row per line in fixed notation."""
    return "".join(
        "".join(_format_number(value) for value in row) + "\n" for row in mat
    )


def format_tensor4d(tensor) -> str:
    """Render a rank-4 tensor with one line per pair of leading indices."""
    lines = []
    for block in tensor:
        for plane in block:
            lines.append(
                "".join(_format_number(value) for row in plane for value in row) + "\n"
            )
    return "".join(lines)


def total_energy(mol: Molecule, tolerance: float = 1e-5, max_iter: int = 20) -> float:
    """Return the SCF electronic energy plus nuclear repulsion."""
    terms = (
        overlap(mol),
        kinetic(mol),
        electron_nuclear_attraction(mol, mol.charges),
        electron_electron_repulsion(mol),
    )
    electronic = scf_cycle(terms, mol, tolerance, max_iter)
    return electronic + nuclear_nuclear_repulsion_energy(mol.coord_list, mol.charges)


def _hydrogen_molecule(bond_length: float) -> Molecule:
    first = sto3g_hydrogen(Coord(0.0, 0.0, 0.0))
    second = sto3g_hydrogen(Coord(0.0, 0.0, bond_length))
    return Molecule([first, second], [1, 1], [first.coords, second.coords])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Hartree-Fock energy of H2 in the STO-3G basis."
    )
    parser.add_argument("--bond-length", type=float, default=1.0,
                        help="H-H distance in bohr (default 1.0)")
    parser.add_argument("--tolerance", type=float, default=1e-5,
                        help="energy convergence threshold (default 1e-5)")
    parser.add_argument("--max-iter", type=int, default=20,
                        help="maximum SCF iterations (default 20)")
    args = parser.parse_args(argv)

    mol = _hydrogen_molecule(args.bond_length)
    energy = total_energy(mol, args.tolerance, args.max_iter)
    print(f"Total energy: {energy:.16g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())