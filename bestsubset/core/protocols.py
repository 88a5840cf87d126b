"""
Core protocols for bestsubset.

Structural interfaces that search backends satisfy. Protocol (structural
typing) rather than ABC, so a backend only has to look the part.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a validated design and produces a Result envelope around
    its parameter payload. All configuration is fixed at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{executor}', e.g. 'cpu_process', 'cpu_thread'
        """
        ...

    def solve(self, design: D) -> Any:
        """
        Execute the search.

        Args:
            design: Validated design

        Returns:
            Result envelope containing the parameter payload and metadata
        """
        ...
