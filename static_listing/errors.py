class BuildError(Exception):
    """Fatal build failure naming the operation and the paths involved"""

    def __init__(self, operation, *paths, cause=None):
        self.operation = operation
        self.paths = tuple(str(p) for p in paths)
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self):
        msg = self.operation
        if self.paths:
            msg += " " + " -> ".join(self.paths)
        if self.cause is not None:
            msg += f": {self.cause}"
        return msg
