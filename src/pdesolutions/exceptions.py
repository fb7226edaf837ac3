"""Exceptions raised by the PDE solution containers."""


class PDESolutionError(Exception):
    """Base class for all errors raised by pdesolutions."""


class EvaluationNotImplementedError(PDESolutionError, NotImplementedError):
    """Calling a solution whose metadata type has no registered evaluator.

    Parameters
    ----------
    solution_type : type
        Class of the solution record that was called.
    metadata_type : type
        Class of the discretization metadata carried by the record.
    """

    def __init__(self, solution_type, metadata_type):
        self.solution_type = solution_type
        self.metadata_type = metadata_type
        super().__init__(
            f"Call for {solution_type.__name__} not implemented for solution "
            f"metadata type {metadata_type.__qualname__}, please post an issue on "
            f"the relevant discretizer package's issue tracker."
        )


class UnrecognizedMetadataError(PDESolutionError, TypeError):
    """Metadata without a recognised time-dependence tag."""


class SolutionShapeError(PDESolutionError, ValueError):
    """Field values that do not agree with the declared domains."""
