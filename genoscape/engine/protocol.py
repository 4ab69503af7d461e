"""Capability interface for the population engine that consumes landscapes.

The synthesis pipeline never touches genome storage or generation stepping.
It only needs the handful of trait operations below, so any engine (the
in-memory reference engine, a compiled simulator binding, a test double)
can be used as long as it provides them.
"""

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class TraitEngine(Protocol):
    """Trait slot operations used by the landscape assembler.

    Engines signal a rejected install (bad locus, bad trait index, wrong
    array length) by raising IndexError or ValueError.
    """

    genome_length: int

    def clear_trait(self, trait: int) -> None: ...

    def set_additive_trait(self, effects: Sequence[float], trait: int) -> None: ...

    def add_trait_coefficient(
        self, value: float, loci: Sequence[int], trait: int
    ) -> None: ...

    def update_traits(self) -> None: ...

    def update_fitness(self) -> None: ...

    def region(self, name: str) -> tuple[int, int]: ...
