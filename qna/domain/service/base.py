"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several entities: a vote
    touches the vote ledger, the author's reputation and the recipient's
    notifications in one operation.
    """

    pass
