# qcomputations

Building blocks for simulating small quantum systems built from qudits, such as
atoms in optical cavities.

- `qcomputations.config.QConfig` holds one shared set of simulation parameters:
  `h`, `w`, `g`, `eps`, the print width, CSV number formatting, figure size and
  more. `QConfig.instance()` returns the shared object, `reset()` restores the
  defaults and `show()` prints the main settings.
- `qcomputations.matrix.Matrix` is a dense real or complex matrix with a storage
  order, C (row-major) or Fortran (column-major), given by `MatrixStyle`. It
  supports addition, subtraction and scalar arithmetic, matrix and
  matrix–vector products (`*` or `@`), `transpose()`, `hermit()` (complex only),
  `submatrix()`, adding and removing rows and columns, `show()` and
  `write_to_csv_file()`, which uses the configured CSV precision.
- `qcomputations.operators` has `Superposition`, a state given as complex
  amplitudes over basis states, and `Operator`, which combines state functions
  with `+` (sum of results), `*` (composition: the right operand is applied
  first) and scalar factors. It also has the qudit primitives `set_qudit`,
  `get_qudit`, `sigma_x`, `sigma_y`, `sigma_z`, `check` and `check_func`, and
  `operator_to_matrix`, which builds an operator's matrix in a basis.
- `qcomputations.graph.StateGraph` finds, breadth first, every basis state an
  operator (and any decoherence operators) reaches from a starting state;
  `is_in_basis` tests membership.
- `qcomputations.diagnostics` makes random real, complex and Hermitian test
  matrices, formats binary strings and probability tables, reports time points
  where probabilities do not sum to one (`check_probs`), and computes eigenpair
  residuals (`eigen_residuals`).

Basis states are your own objects. They must be hashable and immutable and
offer `get_qudit(qudit_index, group_id)`, `get_max_val(qudit_index, group_id)`
and `with_qudit(val, qudit_index, group_id)`, which returns a new state.

## Installation

```
pip install .
```

## Example

```python
from dataclasses import dataclass
from functools import partial

from qcomputations.graph import StateGraph
from qcomputations.matrix import Matrix
from qcomputations.operators import Operator, operator_to_matrix, sigma_x


@dataclass(frozen=True)
class Qubits:
    values: tuple

    def get_qudit(self, qudit_index, group_id):
        return self.values[qudit_index]

    def get_max_val(self, qudit_index, group_id):
        return 1

    def with_qudit(self, val, qudit_index, group_id):
        values = list(self.values)
        values[qudit_index] = val
        return Qubits(tuple(values))


flips = Operator(partial(sigma_x, qudit_index=0)) + Operator(partial(sigma_x, qudit_index=1))
basis = StateGraph(Qubits((0, 0)), flips).basis   # all four two-qubit states
h = operator_to_matrix(flips, basis)              # 4 x 4 complex Matrix
h.show()

a = Matrix.from_rows([[0, 1], [-1, 0]])
print((a @ a).to_rows())                          # [[-1.0, 0.0], [0.0, -1.0]]
```

## What the package does not do

There is no time evolution here: no matrix exponential, no Runge–Kutta or
master-equation integrator. Nothing writes a full set of result files
(Hamiltonian, basis, time grid and probabilities) to a directory, and there is
no plotting; a single matrix can be saved with `Matrix.write_to_csv_file`.
There is no command-line program.

Run the tests with `pytest` after installing the `test` extra.