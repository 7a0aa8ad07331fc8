"""Minimal restricted Hartree-Fock over contracted s-type Gaussians."""

__version__ = "0.1.0"
__all__ = ["basis", "integrals", "scf", "cli"]