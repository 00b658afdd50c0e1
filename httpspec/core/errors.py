class SpecFailure(Exception):
    """Base class for failed expectations."""


class StatusMismatch(SpecFailure):
    def __init__(self, status: int):
        self.status = status
        super().__init__(f"unexpected status {status}")


class HeaderMissing(SpecFailure):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"missing header {name!r}")


class DecodeError(Exception):
    """Base class for response body decoding errors."""


class MissingContentLength(DecodeError):
    def __init__(self):
        super().__init__("response has no content-length header")


class InvalidContentLength(DecodeError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid content-length {value!r}")
