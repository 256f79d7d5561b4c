from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class PolicyEngine(Protocol):
    """External policy store and decision point.

    Policies are string lists laid out as
    ``[subject, resource, verb, domain, ...]``; matching and persistence are
    the engine's business.
    """

    def add_policies(self, policies: Sequence[Sequence[str]]) -> bool:
        ...

    def remove_policies(self, policies: Sequence[Sequence[str]]) -> bool:
        ...

    def get_policy(self) -> List[List[str]]:
        ...

    def get_filtered_policy(self, field_index: int, *field_values: str) -> List[List[str]]:
        ...

    def authorize(self, subject: str, resource: str, verb: str) -> bool:
        ...


__all__ = ["PolicyEngine"]
