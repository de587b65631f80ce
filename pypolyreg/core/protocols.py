"""
Core protocols for PyPolyReg.

The least-squares solve is an injected capability: anything with a
`name` and a `solve(design)` method returning a Result can be passed as
the `backend` of `fit()` and `select_degree()`.

We use Protocol (structural typing) rather than ABC so callers can
supply their own solvers without inheriting from library classes.
"""

from typing import Protocol, TypeVar, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from pypolyreg.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class LeastSquaresBackend(Protocol[D, P]):
    """
    Protocol for least-squares solve backends.

    Backends are stateless: all inputs arrive via the design. This makes
    them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_qr', 'cpu_svd'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Solve the least-squares problem described by the design.

        Raises:
            NumericalError: If numerical issues prevent a solution
        """
        ...
