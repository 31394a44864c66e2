"""
Refinement Engine

Cross-field rules. They run only after every field passed on its own,
so they always see canonical values (dates as ISO text, enums as plain
tags) and never have to defend against type errors.

Each refinement reports against a single field path, which need not
be one of the fields it reads.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from finplan.validation.errors import ErrorCollector
from finplan.validation.transforms import as_timestamp


Predicate = Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True)
class Refinement:
    """
    A whole-object predicate.

    `fields` lists what the predicate reads. The rule is skipped when
    any of them is absent or null, which is what makes the same rule
    correct for both a full create and a partial update.
    """

    name: str
    predicate: Predicate
    message: str
    path: str
    fields: tuple[str, ...] = ()

    def applies_to(self, candidate: Mapping[str, Any]) -> bool:
        return all(candidate.get(name) is not None for name in self.fields)

    def holds(self, candidate: Mapping[str, Any]) -> bool:
        return bool(self.predicate(MappingProxyType(dict(candidate))))


def run_refinements(
    refinements: Iterable[Refinement],
    candidate: Mapping[str, Any],
    collector: ErrorCollector,
) -> None:
    """Evaluate every refinement in order; never short-circuit."""
    for refinement in refinements:
        if not refinement.applies_to(candidate):
            continue
        if not refinement.holds(candidate):
            collector.add(
                (refinement.path,),
                refinement.message,
                kind="relationship",
                issue_type=refinement.name,
            )


# =============================================================================
# COMMON PREDICATES
# =============================================================================

def on_or_after(later: str, earlier: str) -> Predicate:
    """`later` must not precede `earlier` (equal instants pass)."""
    def predicate(data: Mapping[str, Any]) -> bool:
        return as_timestamp(data[later]) >= as_timestamp(data[earlier])
    return predicate


def strictly_after(later: str, earlier: str) -> Predicate:
    def predicate(data: Mapping[str, Any]) -> bool:
        return as_timestamp(data[later]) > as_timestamp(data[earlier])
    return predicate


def not_both(first: str, second: str) -> Predicate:
    """
    At most one of two fields may be set.

    Used with fields=() so that it always runs; null and absent both
    count as 'not set'.
    """
    def predicate(data: Mapping[str, Any]) -> bool:
        return data.get(first) is None or data.get(second) is None
    return predicate
