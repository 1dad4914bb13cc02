"""Names of the permutation tests and the statistics they use."""

from __future__ import annotations

from enum import Enum, auto


class PermutationTest(Enum):
    """Test statistic behind a permutation or semiparametric test."""

    MUTUAL_INFORMATION = auto()
    PEARSON_X2 = auto()
    GAUSSIAN_MUTUAL_INFORMATION = auto()
    LINEAR_CORRELATION = auto()
    FISHER_Z = auto()
    SP_MUTUAL_INFORMATION = auto()
    SP_PEARSON_X2 = auto()
    JT = auto()


_NAMES = {
    "mc-mi": PermutationTest.MUTUAL_INFORMATION,
    "smc-mi": PermutationTest.MUTUAL_INFORMATION,
    "mc-x2": PermutationTest.PEARSON_X2,
    "smc-x2": PermutationTest.PEARSON_X2,
    "mc-mi-g": PermutationTest.GAUSSIAN_MUTUAL_INFORMATION,
    "smc-mi-g": PermutationTest.GAUSSIAN_MUTUAL_INFORMATION,
    "mc-cor": PermutationTest.LINEAR_CORRELATION,
    "smc-cor": PermutationTest.LINEAR_CORRELATION,
    "mc-zf": PermutationTest.FISHER_Z,
    "smc-zf": PermutationTest.FISHER_Z,
    "sp-mi": PermutationTest.SP_MUTUAL_INFORMATION,
    "sp-x2": PermutationTest.SP_PEARSON_X2,
    "mc-jt": PermutationTest.JT,
    "smc-jt": PermutationTest.JT,
}


def remap_permutation_test(name: str) -> PermutationTest:
    """Map a test label such as ``"smc-mi"`` to its statistic."""
    try:
        return _NAMES[name]
    except KeyError:
        raise ValueError(f"unknown permutation test {name!r}.") from None