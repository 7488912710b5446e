"""Module: exceptions."""


class PetClinicError(Exception):
    """Base class for errors raised by the clinic services."""


class InvalidEntityError(PetClinicError, ValueError):
    """An entity handed to ``save`` is missing a reference it cannot live without."""

    def __init__(self, message: str, entity=None):
        super().__init__(message)
        self.entity = entity
