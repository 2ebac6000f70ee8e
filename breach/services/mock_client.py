"""In-memory breach checker for tests in consuming code."""

from typing import Callable, Optional
from shared.domain.models import BreachResult
from shared.interfaces.breach_checker import BreachChecker

CheckFunc = Callable[[str], BreachResult]


class MockBreachClient(BreachChecker):
    """
    Breach checker that never touches the network.

    check() uses check_func. check_hash() uses check_hash_func, or falls
    back to check_func with the hash as input. With neither set, every
    lookup reports not breached.
    """

    def __init__(
        self,
        check_func: Optional[CheckFunc] = None,
        check_hash_func: Optional[CheckFunc] = None,
    ) -> None:
        self.check_func = check_func
        self.check_hash_func = check_hash_func

    def check(self, password: str) -> BreachResult:
        if self.check_func is not None:
            return self.check_func(password)
        return BreachResult(breached=False, count=0)

    def check_hash(self, hash_value: str) -> BreachResult:
        if self.check_hash_func is not None:
            return self.check_hash_func(hash_value)
        if self.check_func is not None:
            return self.check_func(hash_value)
        return BreachResult(breached=False, count=0)
