class ResolutionError(Exception):
    """Base class for failures raised by the resolution pipeline itself."""


class MalformedUrlError(ResolutionError):
    def __init__(self, url: object):
        self.url = url
        super().__init__(
            f"Url '{url}' is incorrectly formatted for a dynamic record url"
        )


class ValidationError(ResolutionError):
    """An email's regarding link does not point at the required record type."""


class CatalogError(Exception):
    """Raised by a metadata catalog or record store when a call faults.

    The pipeline never translates these; it logs and re-raises them.
    """
