"""Root of the multifinance business error hierarchy."""


class DomainException(Exception):
    """
    A customer, limit or financing rule refused the request.

    ``code`` is the stable identifier API clients receive in the ``error``
    field. ``message`` carries the detail for logs. ``public_message`` is
    what the client is shown, which is the same text unless a subclass
    has detail that must stay internal.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    @property
    def public_message(self) -> str:
        return self.message
