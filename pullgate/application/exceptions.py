class PullGateException(Exception):
    pass


class InvalidRequest(PullGateException):
    pass


class StorageError(PullGateException):
    pass


class RemoteCallError(PullGateException):
    pass


class RequestFailed(PullGateException):
    """
    Raised in place of any unexpected error inside of an endpoint. The message
    is the only thing sent back to the caller, the original error is not.
    """
