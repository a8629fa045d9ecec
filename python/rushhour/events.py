"""Generic event notification: observers subscribe to a subject."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Observer(ABC, Generic[T]):
    """Receives events of type ``T``."""

    @abstractmethod
    def handle_event(self, event: T) -> None: ...


class Subject(Generic[T]):
    """Holds observers and delivers events to them in attachment order."""

    def __init__(self) -> None:
        self._observers: list[Observer[T]] = []

    def attach(self, observer: Observer[T]) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer[T]) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            raise ValueError(f"{observer!r} is not attached.") from None

    def notify(self, event: T) -> None:
        for observer in list(self._observers):
            observer.handle_event(event)
