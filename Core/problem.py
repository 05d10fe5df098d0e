import abc
from itertools import count
from typing import Any, Dict, List, Optional
import numpy as np

class Solution:
    """Represents a candidate subset as a 0/1 mask over the problem's items."""
    _id_counter = count()

    def __init__(self, representation: Any, problem: 'ProblemInterface', *, solution_id: Optional[int] = None):
        self.representation = representation
        self.problem = problem
        self.fitness: Optional[float] = None
        self.id: int = int(next(self._id_counter) if solution_id is None else solution_id)

    def evaluate(self):
        """Calculates and stores the fitness of this solution."""
        if self.fitness is None:
            self.fitness = self.problem.evaluate(self)
        return self.fitness

    def selected_indices(self) -> List[int]:
        """Indices of the items whose mask bit is set, in ascending order."""
        return [idx for idx, bit in enumerate(self.representation) if int(bit)]

    def copy(self, *, preserve_id: bool = True):
        """Creates a copy of this solution with its own mask buffer.

        Args:
            preserve_id: When True (default), the cloned solution keeps the same `id`.
        """
        new_id = self.id if preserve_id else None
        new_repr = list(self.representation)
        new_solution = Solution(new_repr, self.problem, solution_id=new_id)
        new_solution.fitness = self.fitness
        return new_solution

    def __lt__(self, other: 'Solution') -> bool:
        """Allows comparison based on fitness (minimization)."""
        if self.fitness is None or other.fitness is None:
            return False
        return self.fitness < other.fitness

    def __eq__(self, other: object) -> bool:
        """Checks if two solutions are equal based on representation."""
        if not isinstance(other, Solution):
            return NotImplemented
        if isinstance(self.representation, np.ndarray) or isinstance(other.representation, np.ndarray):
            return np.array_equal(np.asarray(self.representation), np.asarray(other.representation))
        return list(self.representation) == list(other.representation)

    def __gt__(self, other: 'Solution') -> bool:
        """Allows comparison based on fitness (minimization)."""
        if self.fitness is None or other.fitness is None:
            return False
        return self.fitness > other.fitness

    def __str__(self) -> str:
        return f"Solution({self.representation}, Fitness: {self.fitness})"

class ProblemInterface(abc.ABC):
    """
    Abstract base class defining the interface for a subset-selection problem.
    """

    @abc.abstractmethod
    def evaluate(self, solution: Solution) -> float:
        """
        Evaluates the fitness of a given solution. Lower values are better.

        Args:
            solution: The Solution object to evaluate.

        Returns:
            The fitness value (float).
        """
        pass

    @abc.abstractmethod
    def get_initial_solution(self) -> Solution:
        """
        Returns a valid starting solution (for subset problems, the empty subset).

        Returns:
            A Solution object representing an initial state.
        """
        pass

    @abc.abstractmethod
    def get_problem_info(self) -> Dict[str, Any]:
        """
        Returns a dictionary containing essential information about the problem.
        Examples: 'dimension', 'capacity', 'problem_type'.

        Returns:
            A dictionary with problem-specific details.
        """
        pass

    def get_bounds(self) -> Dict[str, Any]:
        """
        Optional hook to expose objective bounds.
        Subclasses can override this for richer metadata; default returns an empty dict.
        """
        return {}
