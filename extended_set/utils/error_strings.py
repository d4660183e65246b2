# Messages are kept here so callers and tests can match on them
REDUCE_EMPTY_NO_INITIAL: str = "initial value required for reduce over empty set"
NOT_CALLABLE: str = "'{type_name}' object passed to {operation}() is not callable"


class InvalidOperation(TypeError):
    def __init__(self):
        super().__init__(REDUCE_EMPTY_NO_INITIAL)
