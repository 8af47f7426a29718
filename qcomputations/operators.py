"""Superpositions of basis states and linear operators acting on them."""

from __future__ import annotations

import numbers
from functools import partial
from typing import Any, Callable, Iterable, Iterator, Mapping, Protocol, Sequence, Tuple, Union

from .matrix import Matrix


class QuditState(Protocol):
    """What a basis state must offer to the operators in this module.

    States must be hashable and immutable: ``with_qudit`` returns a new state.
    """

    def get_qudit(self, qudit_index: int, group_id: int) -> int: ...

    def get_max_val(self, qudit_index: int, group_id: int) -> int: ...

    def with_qudit(self, val: int, qudit_index: int, group_id: int) -> QuditState: ...


class Superposition:
    """A linear combination of basis states with complex amplitudes.

    Components keep the order in which they were first added.
    """

    __slots__ = ("_amps",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        components: Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]] = (),
    ) -> None:
        items = components.items() if isinstance(components, Mapping) else components
        amps: dict = {}
        for state, amplitude in items:
            amps[state] = amps.get(state, 0j) + complex(amplitude)
        self._amps = amps

    @classmethod
    def of(cls, state: Any, amplitude: Any = 1.0) -> Superposition:
        """A superposition holding one state with the given amplitude."""
        return cls([(state, amplitude)])

    @property
    def components(self) -> list:
        """The states present, in insertion order."""
        return list(self._amps)

    def items(self) -> list:
        """Pairs of (state, amplitude) in insertion order."""
        return list(self._amps.items())

    def __getitem__(self, state: Any) -> complex:
        return self._amps.get(state, 0j)

    def __len__(self) -> int:
        return len(self._amps)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._amps))

    def __add__(self, other: Any) -> Superposition:
        if not isinstance(other, Superposition):
            return NotImplemented
        merged = dict(self._amps)
        for state, amplitude in other._amps.items():
            merged[state] = merged.get(state, 0j) + amplitude
        return Superposition(merged)

    def __mul__(self, factor: Any) -> Superposition:
        if not isinstance(factor, numbers.Number):
            return NotImplemented
        factor = complex(factor)
        return Superposition({state: amp * factor for state, amp in self._amps.items()})

    def __rmul__(self, factor: Any) -> Superposition:
        return self.__mul__(factor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Superposition):
            return NotImplemented
        return self._amps == other._amps

    def __repr__(self) -> str:
        return f"Superposition({self._amps!r})"


StateFunction = Callable[[Any], Superposition]


def _as_superposition(value: Any) -> Superposition:
    return value if isinstance(value, Superposition) else Superposition.of(value)


def _invoke(func: StateFunction, superposition: Superposition) -> Superposition:
    result = Superposition()
    for state, amplitude in superposition.items():
        result = result + _as_superposition(func(state)) * amplitude
    return result


def _name(func: Callable) -> str:
    if isinstance(func, partial):
        return _name(func.func)
    return getattr(func, "__name__", repr(func))


def _scaler(num: Any) -> StateFunction:
    def scale(state: Any) -> Superposition:
        return Superposition.of(state, num)

    scale.__name__ = f"scale({num})"
    return scale


class Operator:
    """A linear operator built from state functions with ``+`` and ``*``.

    ``A * B`` applies ``B`` first and then ``A``; ``A + B`` sums the results.
    A function maps one basis state to a :class:`Superposition`.
    """

    __slots__ = ("_terms",)

    def __init__(self, func: StateFunction | None = None) -> None:
        self._terms: tuple = () if func is None else ((func,),)

    @classmethod
    def _from_terms(cls, terms: tuple) -> Operator:
        op = cls()
        op._terms = terms
        return op

    def __bool__(self) -> bool:
        return bool(self._terms)

    def __add__(self, other: Any) -> Operator:
        if not isinstance(other, Operator):
            return NotImplemented
        return Operator._from_terms(self._terms + other._terms)

    def __mul__(self, other: Any) -> Operator:
        if isinstance(other, Operator):
            if not other._terms:
                return self
            if not self._terms:
                raise ValueError("cannot multiply an empty operator by a non-empty one")
            return Operator._from_terms(tuple(a + b for a in self._terms for b in other._terms))
        if isinstance(other, numbers.Number):
            if not self._terms:
                raise ValueError("cannot multiply an empty operator by a number")
            return Operator(_scaler(other)) * self
        return NotImplemented

    def __rmul__(self, other: Any) -> Operator:
        if isinstance(other, numbers.Number):
            return self.__mul__(other)
        return NotImplemented

    def run(self, init_state: Any) -> Superposition:
        """Apply the operator to a state or a superposition."""
        if not self._terms:
            raise ValueError("cannot run an empty operator")
        start = _as_superposition(init_state)
        result = Superposition()
        for term in self._terms:
            current = start
            for func in reversed(term):
                current = _invoke(func, current)
            result = result + current
        return result

    def show(self) -> None:
        """Print each summand as the names of its functions."""
        for term in self._terms:
            print(" * ".join(_name(func) for func in term))


def operator_to_matrix(op: Operator, basis: Sequence[Any]) -> Matrix:
    """The complex matrix of ``op`` in ``basis``; column j is the image of basis[j]."""
    basis = list(basis)
    positions = {state: index for index, state in enumerate(basis)}
    dim = len(basis)
    matrix = Matrix(dim, dim, 0j)
    for col, state in enumerate(basis):
        for result_state, amplitude in op.run(state).items():
            try:
                row = positions[result_state]
            except KeyError:
                raise ValueError(f"state {result_state!r} is not in the basis") from None
            matrix[row, col] = amplitude
    return matrix


def set_qudit(state: Any, val: int, qudit_index: int = 0, group_id: int = 0) -> Superposition:
    """Set a qudit to ``val``; an out-of-range value gives the empty superposition."""
    if val < 0 or val > state.get_max_val(qudit_index, group_id):
        return Superposition()
    return Superposition.of(state.with_qudit(val, qudit_index, group_id))


def get_qudit(state: Any, qudit_index: int = 0, group_id: int = 0) -> Superposition:
    """The same state, with the qudit's value as its amplitude."""
    return Superposition.of(state, state.get_qudit(qudit_index, group_id))


def _binary_qudit(state: Any, qudit_index: int, group_id: int) -> int:
    qudit = state.get_qudit(qudit_index, group_id)
    if qudit not in (0, 1):
        raise ValueError(f"Pauli operators need a qubit, got value {qudit}")
    return qudit


def sigma_x(state: Any, qudit_index: int = 0, group_id: int = 0) -> Superposition:
    """Pauli X: flip a qubit."""
    flipped = 1 - _binary_qudit(state, qudit_index, group_id)
    return Superposition.of(state.with_qudit(flipped, qudit_index, group_id))


def sigma_y(state: Any, qudit_index: int = 0, group_id: int = 0) -> Superposition:
    """Pauli Y: flip a qubit with a phase of i (0 -> 1) or -i (1 -> 0)."""
    flipped = 1 - _binary_qudit(state, qudit_index, group_id)
    phase = 1j if flipped == 1 else -1j
    return Superposition.of(state.with_qudit(flipped, qudit_index, group_id), phase)


def sigma_z(state: Any, qudit_index: int = 0, group_id: int = 0) -> Superposition:
    """The qubit's value as amplitude, negated when the qubit is 1."""
    qudit = _binary_qudit(state, qudit_index, group_id)
    return Superposition.of(state, -qudit if qudit == 1 else qudit)


def check(state: Any, check_val: int, qudit_index: int = 0, group_id: int = 0) -> Superposition:
    """Keep the state if the qudit equals ``check_val``, otherwise give nothing."""
    if state.get_qudit(qudit_index, group_id) != check_val:
        return Superposition()
    return Superposition.of(state)


def check_func(state: Any, func: Callable[[Any], bool]) -> Superposition:
    """Drop the state when ``func(state)`` is true, otherwise keep it."""
    if func(state):
        return Superposition()
    return Superposition.of(state)