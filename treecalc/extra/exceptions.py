from typing import Literal


class PositionedError(Exception):
    """
    Error that can point at the character of the source text it was raised for
    :param message: human readable description
    :param source: text the error was found in
    :param index: position of the faulty character in 'source'
    """
    def __init__(self, message: str, source: str | None = None, index: int | None = None):
        super().__init__(message)
        self.message = message
        self.source = source
        self.index = index

    @classmethod
    def indexed(cls, message: str, source: str, index: int, **kwargs):
        return cls(message, source=source, index=index, **kwargs)

    @classmethod
    def unindexed(cls, message: str, **kwargs):
        return cls(message, **kwargs)

    @property
    def is_positioned(self) -> bool:
        return self.source is not None and self.index is not None

    def __str__(self) -> str:
        if not self.is_positioned:
            return self.message
        return f"{self.message}\n{self.source}\n{' ' * self.index}^"  # type: ignore


class LexerError(PositionedError):
    pass


class InvalidNumberError(LexerError):
    pass


class InvalidCharacterError(LexerError):
    pass


class InvalidParenthesisError(LexerError):
    def __init__(self, message, source=None, index=None, *,
                 exc_type: Literal["empty", "not_closed"]):
        super().__init__(message, source, index)
        self.exc_type = exc_type


class TreeBuildError(PositionedError):
    pass


class InvalidTokenError(TreeBuildError):
    def __init__(self, message, source=None, index=None, *,
                 exc_type: Literal["invalid_token", "ambiguous_numbers", "missing_operand"]):
        super().__init__(message, source, index)
        self.exc_type = exc_type


class UnsupportedArityError(TreeBuildError):
    pass


class ArityMismatchError(PositionedError):
    pass
