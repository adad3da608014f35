"""Error taxonomy shared by the services and the HTTP layer.

Each error carries the status code and public message the API answers with;
the detail passed to the constructor is for logs only.
"""


class JobSearchError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class ValidationError(JobSearchError):
    status_code = 400
    message = "At least one search parameter is required"


class ExternalSourceError(JobSearchError):
    """Transport failure or malformed payload from the job-search source.

    Raised inside the JSearch client and absorbed there; never surfaced.
    """

    status_code = 502
    message = "External source unavailable"


class NotFoundError(JobSearchError):
    status_code = 404
    message = "Job not found"


class StoreError(JobSearchError):
    status_code = 500
    message = "Internal Server Error"
