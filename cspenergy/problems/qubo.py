from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Sequence, Tuple

import numpy as np

from cspenergy.errors import WeightLengthError
from cspenergy.models import SoftConstraint
from cspenergy.problem import ConstraintSatisfactionProblem, check_local_config


class QUBOSpec(enum.Enum):
    LINEAR = "linear"
    QUADRATIC = "quadratic"


class QUBOSize(NamedTuple):
    num_variables: int


@dataclass(frozen=True, eq=False)
class QUBO(ConstraintSatisfactionProblem):
    """Quadratic unconstrained binary optimization, ``E(x) = sum_ij Q_ij x_i x_j``.

    The matrix is the weight storage: diagonal entries become linear terms and
    ``Q_ij + Q_ji`` becomes the coupling of the pair ``i < j``. Zero entries are
    skipped.
    """

    matrix: np.ndarray

    def __post_init__(self) -> None:
        matrix = np.array(self.matrix, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise WeightLengthError(f"QUBO matrix must be square, got shape {matrix.shape}")
        matrix.flags.writeable = False
        object.__setattr__(self, "matrix", matrix)

    @classmethod
    def from_terms(
        cls, num_variables: int, linear: Dict[int, float], quadratic: Dict[Tuple[int, int], float]
    ) -> "QUBO":
        """Build a QUBO from 1-based linear and pairwise coefficients."""
        matrix = np.zeros((num_variables, num_variables))
        for i, coef in linear.items():
            matrix[i - 1, i - 1] += coef
        for (i, j), coef in quadratic.items():
            a, b = sorted((i, j))
            matrix[a - 1, b - 1] += coef
        return cls(matrix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QUBO):
            return NotImplemented
        return np.array_equal(self.matrix, other.matrix)

    @property
    def weights(self) -> np.ndarray:
        return self.matrix

    def num_variables(self) -> int:
        return self.matrix.shape[0]

    @classmethod
    def flavors(cls) -> Tuple[int, ...]:
        return (0, 1)

    def problem_size(self) -> QUBOSize:
        return QUBOSize(num_variables=self.num_variables())

    def set_weights(self, weights: Sequence[Any]) -> "QUBO":
        weights = np.asarray(weights, dtype=float)
        if weights.shape != self.matrix.shape:
            raise WeightLengthError(f"QUBO weights must have shape {self.matrix.shape}, got {weights.shape}")
        return QUBO(weights)

    def soft_constraints(self) -> List[SoftConstraint]:
        n = self.num_variables()
        constraints = []
        for i in range(n):
            if self.matrix[i, i] != 0:
                constraints.append(SoftConstraint((i + 1,), QUBOSpec.LINEAR, float(self.matrix[i, i])))
        for i in range(n):
            for j in range(i + 1, n):
                coef = self.matrix[i, j] + self.matrix[j, i]
                if coef != 0:
                    constraints.append(SoftConstraint((i + 1, j + 1), QUBOSpec.QUADRATIC, float(coef)))
        return constraints

    def local_energy(self, constraint: SoftConstraint, config: Sequence[Any]) -> Any:
        check_local_config(constraint, config)
        return constraint.weight * int(all(c == 1 for c in config))
