# This source code is part of the Splitnet package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides the :class:`ProgressMonitor`, which allows
callers to follow and cancel a running optimization.
"""

__name__ = "splitnet.nnls"
__author__ = "The Splitnet contributors"
__all__ = ["ProgressMonitor"]

from .error import CancelledError


class ProgressMonitor:
    """
    Collaborator for reporting the progress of an optimization and for
    cooperative cancellation.

    The optimization calls :meth:`check_for_cancel()` and
    :meth:`set_progress()` once per outer iteration.
    Cancellation is requested via :meth:`cancel()`, e.g. from another
    thread or from a subclass that overrides :meth:`set_progress()`.

    Attributes
    ----------
    iteration : int
        The most recently reported iteration.
    max_iterations : int or None
        The maximum number of iterations of the monitored computation.
    objective : float or None
        The most recently reported objective value.
    cancelled : bool
        True, if cancellation was requested.

    Examples
    --------

    >>> monitor = ProgressMonitor()
    >>> monitor.set_progress(3, 10, 0.5)
    >>> print(monitor.iteration, monitor.max_iterations, monitor.objective)
    3 10 0.5
    >>> monitor.cancel()
    >>> monitor.check_for_cancel()
    Traceback (most recent call last):
    ...
    splitnet.nnls.CancelledError: Computation was cancelled
    """

    def __init__(self):
        self.iteration = 0
        self.max_iterations = None
        self.objective = None
        self._cancelled = False

    @property
    def cancelled(self):
        return self._cancelled

    def cancel(self):
        """
        Request cancellation of the monitored computation.
        """
        self._cancelled = True

    def check_for_cancel(self):
        """
        Raise a :class:`CancelledError`, if cancellation was requested.

        Raises
        ------
        CancelledError
            If :meth:`cancel()` was called.
        """
        if self._cancelled:
            raise CancelledError("Computation was cancelled")

    def set_progress(self, iteration, max_iterations, objective=None):
        """
        Report the progress of the monitored computation.

        Parameters
        ----------
        iteration : int
            The number of completed iterations.
        max_iterations : int
            The maximum number of iterations.
        objective : float, optional
            The current value of the objective function.
        """
        self.iteration = iteration
        self.max_iterations = max_iterations
        self.objective = objective
