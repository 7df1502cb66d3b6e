"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span an entity and its repository,
    such as ownership checks, thread validation and seller denormalization.
    """

    pass
