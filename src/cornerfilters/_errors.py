class FilterError(ValueError):
    pass


class InvalidParameter(FilterError):
    def __init__(self, parameter, message):
        super().__init__(f"{parameter}: {message}")
        self.parameter = parameter


class PreconditionViolation(FilterError):
    def __init__(self, stage, message):
        super().__init__(f"{stage}: {message}")
        self.stage = stage
