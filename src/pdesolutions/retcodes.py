"""Return codes of the numeric solve that produced a solution."""
from enum import Enum


class ReturnCode(Enum):
    """Outcome of the originating solve.

    SUCCESS
        The solver finished normally.
    TERMINATED
        The solver stopped early because a user-defined callback asked it to.
    FAILURE
        The solver exited because of an error.
    """
    SUCCESS = "Success"
    TERMINATED = "Terminated"
    FAILURE = "Failure"

    def __str__(self):
        return self.value


def successful_retcode(retcode) -> bool:
    """Whether a return code (or a solution's return code) counts as a success.

    Early termination by a callback is a requested stop, so it counts too.

    Parameters
    ----------
    retcode : ReturnCode or solution
        A return code, or any object with a ``retcode`` attribute.

    Returns
    -------
    bool
    """
    if not isinstance(retcode, ReturnCode):
        retcode = retcode.retcode
    return retcode in (ReturnCode.SUCCESS, ReturnCode.TERMINATED)
