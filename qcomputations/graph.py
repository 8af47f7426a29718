"""Basis discovery by repeatedly applying operators to a starting state."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable

from .operators import Operator, Superposition


def is_in_basis(basis: Iterable[Any], state: Any) -> bool:
    """Whether a state equal to ``state`` is among ``basis``."""
    return any(member == state for member in basis)


class StateGraph:
    """The set of states reachable from a start through given operators.

    States are explored breadth first; the basis keeps discovery order.
    """

    def __init__(
        self,
        init_state: Any,
        op: Operator,
        decoherence: Iterable[Operator] = (),
    ) -> None:
        start = init_state if isinstance(init_state, Superposition) else Superposition.of(init_state)
        operators = [op, *decoherence]
        basis: list = []
        seen: set = set()
        queue: deque = deque()

        def visit(state: Any) -> None:
            if state not in seen:
                seen.add(state)
                basis.append(state)
                queue.append(state)

        for state in start.components:
            visit(state)
        while queue:
            state = queue.popleft()
            for operator in operators:
                for reached in operator.run(state).components:
                    visit(reached)
        self._basis = basis

    @property
    def basis(self) -> list:
        """The reachable states, in the order they were found."""
        return list(self._basis)

    def show(self) -> None:
        """Print every state of the basis on its own line."""
        for state in self._basis:
            print(state)