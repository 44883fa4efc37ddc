from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base class for aggregate roots.

    Aggregates are mutable and re-validated on assignment, so invariants
    checked in model validators keep holding after a state change.
    """

    model_config = ConfigDict(validate_assignment=True)
