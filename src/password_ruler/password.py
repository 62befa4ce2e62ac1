from dataclasses import dataclass

from .exc import InvalidArgumentError

__all__ = ("Password",)


@dataclass(frozen=True, slots=True)
class Password:
    """
    A candidate password.

    Equality and hashing are based on the text only. No classification is cached here,
    every rule derives what it needs from :attr:`text`.
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidArgumentError(
                "Password text must be a string, got {ctx[value]!r}",
                ctx=InvalidArgumentError.Context(argument="text", value=self.text),
            )

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        # never leak the secret through logs or tracebacks
        return "Password(<%d chars>)" % len(self.text)
