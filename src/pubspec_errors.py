class BumpError(Exception):
    pass


class MissingFieldError(BumpError, KeyError):
    def __init__(self, field, path=None):
        self.field = field
        self.path = path
        where = f" in {path}" if path is not None else ""
        super().__init__(f"'{field}' field not found{where}")

    def __str__(self):
        # KeyError would wrap the message in quotes
        return self.args[0]


class MalformedVersionError(BumpError, ValueError):
    def __init__(self, value, reason="expected MAJOR.MINOR.PATCH+BUILD"):
        self.value = value
        self.reason = reason
        super().__init__(f"malformed version {value!r}: {reason}")
