"""Ordered, de-duplicated CSS class tokens."""

from __future__ import annotations

from typing import Iterator, List, Union

ClassInput = Union[str, "ClassSet"]


class ClassSet:
    """Class tokens of an element, kept unique and in insertion order.

    Tokens are trimmed before any comparison; empty tokens are ignored.
    Mutators return the set so calls can be chained.
    """

    def __init__(self, *inputs: ClassInput) -> None:
        self._tokens: List[str] = []
        self.merge(*inputs)

    def __str__(self) -> str:
        return " ".join(self._tokens)

    def __repr__(self) -> str:
        return f"ClassSet({str(self)!r})"

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.has(token)

    def has(self, token: str) -> bool:
        return token.strip() in self._tokens

    def add(self, token: str) -> ClassSet:
        token = token.strip()
        if token and token not in self._tokens:
            self._tokens.append(token)
        return self

    def remove(self, token: str) -> ClassSet:
        token = token.strip()
        if token in self._tokens:
            self._tokens.remove(token)
        return self

    def toggle(self, token: str) -> ClassSet:
        token = token.strip()
        if not token:
            return self
        if token in self._tokens:
            self._tokens.remove(token)
        else:
            self._tokens.append(token)
        return self

    def merge(self, *inputs: ClassInput) -> ClassSet:
        """Add every token of each input.

        A string is split on whitespace; another set contributes its tokens in
        order. Everything goes through `add`, so duplicates are dropped.
        """
        for item in inputs:
            tokens = item.as_list() if isinstance(item, ClassSet) else item.split()
            for token in tokens:
                self.add(token)
        return self

    def as_list(self) -> List[str]:
        return list(self._tokens)


__all__ = ["ClassInput", "ClassSet"]
