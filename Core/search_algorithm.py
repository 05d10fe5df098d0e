import abc
from typing import Optional
from .problem import ProblemInterface, Solution # Use relative import

class SearchAlgorithm(abc.ABC):
    """
    Abstract base class for step-driven search algorithms.

    A search is driven by `initialize()` followed by repeated `step()` calls
    until `is_finished()` reports True; `run()` does exactly that and returns
    the best solution found.
    """
    # Short registry name, e.g. "exhaustive".
    name: Optional[str] = None

    def __init__(self, problem: ProblemInterface, **kwargs):
        """
        Initializes the search algorithm.

        Args:
            problem: An object implementing ProblemInterface.
            **kwargs: Algorithm-specific settings.
        """
        self.problem = problem
        self.best_solution: Optional[Solution] = None
        self.iteration = 0
        # Store kwargs for algorithm-specific use
        self._config = kwargs

    def initialize(self):
        """
        Sets up the algorithm's initial state.
        Should be called before starting the search steps.
        """
        self.iteration = 0
        self.best_solution = None
        self._update_best_solution(self.problem.get_initial_solution())

    @abc.abstractmethod
    def step(self):
        """
        Performs a single unit of work and updates best_solution when it improves.
        """
        pass

    @abc.abstractmethod
    def is_finished(self) -> bool:
        """True once the search space has been fully covered."""
        pass

    def run(self) -> Solution:
        """Initialize, step until finished, and return the best solution."""
        self.initialize()
        while not self.is_finished():
            self.step()
        best = self.get_best_solution()
        if best is None:
            raise RuntimeError(f"{type(self).__name__} finished without a solution")
        return best

    def _update_best_solution(self, candidate: Optional[Solution]) -> bool:
        """Replace the best solution when the candidate has strictly better fitness."""
        if candidate is None:
            return False
        candidate.evaluate()
        if self.best_solution is None or candidate < self.best_solution:
            self.best_solution = candidate
            return True
        return False

    def get_best_solution(self) -> Optional[Solution]:
        """
        Returns the best solution found by the algorithm so far.

        Returns:
            The best Solution object found, or None if the search hasn't started.
        """
        return self.best_solution
