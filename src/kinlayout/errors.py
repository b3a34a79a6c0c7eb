"""Validation errors raised while building a layout."""


class DataValidationError(ValueError):
    """Base class for every fatal input problem."""


class DuplicateIdError(DataValidationError):
    def __init__(self, person_id: int):
        self.person_id = person_id
        super().__init__(f"Duplicate person id={person_id}")


class UnknownReferenceError(DataValidationError):
    def __init__(self, person_id: int, edge_kind: str):
        self.person_id = person_id
        self.edge_kind = edge_kind
        super().__init__(f"{edge_kind} edge references unknown person id={person_id}")


class SelfSpouseError(DataValidationError):
    def __init__(self, person_id: int):
        self.person_id = person_id
        super().__init__(f"Person id={person_id} cannot be their own spouse")


class SelfParentError(DataValidationError):
    def __init__(self, person_id: int):
        self.person_id = person_id
        super().__init__(f"Person id={person_id} cannot be their own parent")


class TooManyParentsError(DataValidationError):
    def __init__(self, child_id: int, parent_ids: list[int]):
        self.child_id = child_id
        self.parent_ids = list(parent_ids)
        super().__init__(
            f"Child id={child_id} has more than two parents ({len(parent_ids)}): {parent_ids}"
        )


class ParentCycleError(DataValidationError):
    def __init__(self, cycle: list[int]):
        self.cycle = list(cycle)
        super().__init__(f"Cycle detected in parent-child relationships: {cycle}")


class UnknownRootError(DataValidationError):
    def __init__(self, root_id: int):
        self.root_id = root_id
        super().__init__(f"root_id={root_id} is not among the people")


class MissingRootIdError(DataValidationError):
    def __init__(self, value=None):
        self.value = value
        super().__init__(f"Options must contain an integer root_id (got {value!r})")


class InvalidOptionsError(DataValidationError):
    pass
