"""Dependency ordering of contract deployments."""

from typing import Dict, Iterable, List, Set

from .exceptions import CyclicDependencyError, DuplicateContractError, UnknownDependencyError
from .types import ContractSpec


def validate(specs: Iterable[ContractSpec]) -> List[ContractSpec]:
    """
    Check that names are unique and every dependency is in the plan.

    Args:
        specs: Contract specs in declaration order

    Returns:
        The specs as a list, declaration order preserved

    Raises:
        DuplicateContractError: If a name is declared twice
        UnknownDependencyError: If a dependency names a contract absent from the plan
    """
    declared = list(specs)

    names: Set[str] = set()
    for spec in declared:
        if spec.name in names:
            raise DuplicateContractError(spec.name)
        names.add(spec.name)

    for spec in declared:
        for dependency in sorted(spec.dependencies()):
            if dependency not in names:
                raise UnknownDependencyError(spec.name, dependency)

    return declared


def plan(specs: Iterable[ContractSpec]) -> List[ContractSpec]:
    """
    Order contract specs so each one follows all of its dependencies.

    Ties are broken by declaration order: after every emitted spec, the next
    one is the earliest declared spec whose dependencies have all been
    emitted. A declaration order that already satisfies every dependency is
    returned unchanged, and the same input always yields the same sequence.

    Args:
        specs: Contract specs in declaration order

    Returns:
        Specs in deployment order

    Raises:
        DuplicateContractError: If a name is declared twice
        UnknownDependencyError: If a dependency names a contract absent from the plan
        CyclicDependencyError: If the dependencies contain a cycle
    """
    remaining = validate(specs)
    dependencies: Dict[str, Set[str]] = {
        spec.name: set(spec.dependencies()) for spec in remaining
    }

    ordered: List[ContractSpec] = []
    emitted: Set[str] = set()

    while remaining:
        ready = next(
            (spec for spec in remaining if dependencies[spec.name] <= emitted), None
        )
        if ready is None:
            raise CyclicDependencyError(spec.name for spec in remaining)

        ordered.append(ready)
        emitted.add(ready.name)
        remaining.remove(ready)

    return ordered
